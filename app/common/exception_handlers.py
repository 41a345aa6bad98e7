# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.common.errors import AppError
from app.common.faults import FaultError
from app.common.normalizer import normalize
from app.common.shaper import Environment, shape
from app.common.trace import TRACE_HEADER, get_trace_id
from app.infra.config import settings

logger = logging.getLogger(__name__)


def current_environment(request: Request) -> Environment:
    env = getattr(request.app.state, "environment", None) if "app" in request.scope else None
    return env if isinstance(env, Environment) else Environment.parse(settings.ENV)


def _request_context(request: Request, error: AppError) -> Dict[str, Any]:
    user = request.scope.get("state", {}).get("user")
    return {
        "status_code": error.status_code,
        "status": error.status,
        "ip": request.client.host if request.client else None,
        "url": str(request.url),
        "method": request.method,
        "user": getattr(user, "id", None) or "N/A",
        "stack": error.stack,
    }


def log_error(request: Request, raw: BaseException, error: AppError, environment: Environment) -> None:
    if environment == Environment.DEVELOPMENT:
        logger.error(
            "%s %s -> %s %s",
            request.method,
            request.url.path,
            error.status_code,
            error.message,
            exc_info=(type(raw), raw, raw.__traceback__),
        )
        return

    context = _request_context(request, error)
    logger.error(
        "Prod Error: %s %s",
        error.message,
        json.dumps(context, ensure_ascii=False, default=str),
        extra={"error_context": context},
    )


def handle_error(request: Request, exc: BaseException) -> JSONResponse:
    """归一化 -> 记录日志（一次） -> 按环境渲染"""
    environment = current_environment(request)
    error = normalize(exc)
    log_error(request, exc, error, environment)
    return shape(error, environment).to_response(headers={TRACE_HEADER: get_trace_id()})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return handle_error(request, exc)


async def fault_error_handler(request: Request, exc: FaultError) -> JSONResponse:
    return handle_error(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return handle_error(request, exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return handle_error(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(FaultError, fault_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    # 同时覆盖 slowapi 的 RateLimitExceeded（HTTPException 子类）
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
