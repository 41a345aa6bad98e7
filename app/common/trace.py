# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Optional

TRACE_HEADER = "X-Trace-Id"
REQUEST_ID_HEADER = "X-Request-Id"

_trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="-")


def new_trace_id() -> str:
    return uuid.uuid4().hex


def bind_trace_id(trace_id: Optional[str]) -> Token:
    """绑定当前请求的 trace_id，返回 token 以便请求结束时还原"""
    return _trace_id_ctx.set(trace_id or new_trace_id())


def reset_trace_id(token: Token) -> None:
    _trace_id_ctx.reset(token)


def get_trace_id() -> str:
    return _trace_id_ctx.get() or "-"
