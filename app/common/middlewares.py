# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.common.exception_handlers import handle_error
from app.common.trace import REQUEST_ID_HEADER, TRACE_HEADER, bind_trace_id, get_trace_id, reset_trace_id

logger = logging.getLogger(__name__)


class TraceIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = bind_trace_id(request.headers.get(REQUEST_ID_HEADER))
        try:
            response: Response = await call_next(request)
            response.headers[TRACE_HEADER] = get_trace_id()
            logger.info(
                "%s %s -> %s",
                request.method,
                request.url.path,
                response.status_code,
            )
            return response
        finally:
            reset_trace_id(token)


class ErrorHandlingMiddleware:
    """管道末端的错误处理

    捕获下游未被处理的异常，交给 handle_error 渲染；下游已开始写响应时不再重复发送。
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def _send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, _send)
        except Exception as exc:  # noqa: BLE001
            if response_started:
                # 响应已开始，交给服务器记录并断开连接
                raise
            response = handle_error(Request(scope, receive), exc)
            await response(scope, receive, send)
