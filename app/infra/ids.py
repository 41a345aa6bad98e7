# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any

from app.common.faults import CastFault
from app.common.result import Err, Ok, Result

# 数据库 BIGINT 上限
MAX_ID = 2**63 - 1


def parse_id(raw: Any, field: str = "id") -> Result[int]:
    """路径参数 -> 正整数 id，失败返回 CastFault"""
    text = str(raw).strip()
    # 只接受 ASCII 数字，"²" 之类的 isdigit() 为真但 int() 会失败
    if not (text.isascii() and text.isdigit()):
        return Err(CastFault(field=field, value=raw))
    try:
        value = int(text)
    except ValueError:
        return Err(CastFault(field=field, value=raw))
    if not 0 < value <= MAX_ID:
        return Err(CastFault(field=field, value=raw))
    return Ok(value)
