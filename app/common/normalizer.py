# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""错误归一化

任何来源的错误 -> 唯一的 AppError。纯函数，不修改原始错误对象。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Union

import jwt
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.common.errors import AppError, TooManyRequestsError, UnauthorizedError
from app.common.faults import CastFault, DuplicateKeyFault, Fault, FaultError, ValidationFault

DEFAULT_MESSAGE = "Something went wrong!"
EXPIRED_TOKEN_MESSAGE = "Your token has expired! Please log in again."
INVALID_TOKEN_MESSAGE = "Invalid token. Please log in again!"
RATE_LIMITED_MESSAGE = "Too many requests from this IP, please try again later."

_LOC_PREFIXES = {"body", "query", "path", "header", "cookie"}

RawError = Union[AppError, Fault, BaseException]


def normalize(raw: RawError) -> AppError:
    if isinstance(raw, AppError) and raw.is_operational:
        return raw

    if isinstance(raw, FaultError):
        return _with_cause(_from_fault(raw.fault), raw)
    if isinstance(raw, (CastFault, ValidationFault, DuplicateKeyFault)):
        return _from_fault(raw)

    if isinstance(raw, RequestValidationError):
        return _with_cause(_from_fault(request_validation_fault(raw.errors())), raw)

    # ExpiredSignatureError 是 InvalidTokenError 的子类，需先判断
    if isinstance(raw, jwt.ExpiredSignatureError):
        return _with_cause(UnauthorizedError(EXPIRED_TOKEN_MESSAGE), raw)
    if isinstance(raw, jwt.InvalidTokenError):
        return _with_cause(UnauthorizedError(INVALID_TOKEN_MESSAGE), raw)

    # RateLimitExceeded 是 HTTPException 的子类
    if isinstance(raw, RateLimitExceeded):
        return _with_cause(TooManyRequestsError(RATE_LIMITED_MESSAGE), raw)
    if isinstance(raw, StarletteHTTPException) and raw.status_code < 500:
        return _with_cause(AppError(str(raw.detail), raw.status_code), raw)

    return _unclassified(raw)


def _from_fault(fault: Fault) -> AppError:
    if isinstance(fault, CastFault):
        return AppError(f"Invalid {fault.field}: {fault.value}.", 400)

    if isinstance(fault, ValidationFault):
        messages = ". ".join(fault.errors.values())
        return AppError(f"Invalid input data: {messages}", 400)

    if isinstance(fault, DuplicateKeyFault):
        values = list(fault.key_value.values())
        value = values[0] if values else "unknown"
        return AppError(f"Duplicate field value: '{value}'. Please use another value!", 400)

    return _unclassified(fault)


def _unclassified(raw: Any) -> AppError:
    message = getattr(raw, "message", None) or (str(raw) if isinstance(raw, BaseException) else "")
    normalized = AppError(message or DEFAULT_MESSAGE, 500, is_operational=False)
    if isinstance(raw, BaseException):
        normalized.__cause__ = raw
    return normalized


def _with_cause(normalized: AppError, raw: BaseException) -> AppError:
    normalized.__cause__ = raw
    return normalized


def request_validation_fault(errors: Iterable[Dict[str, Any]]) -> ValidationFault:
    """把框架的请求体校验错误转换为 ValidationFault"""
    collected: Dict[str, str] = {}
    for err in errors:
        parts = [str(p) for p in err.get("loc", ()) if p not in _LOC_PREFIXES]
        name = ".".join(parts) or "body"
        if err.get("type") == "missing":
            message = f"{name} is required"
        else:
            message = f"{name}: {err.get('msg', 'invalid value')}"
        collected.setdefault(name, message)
    return ValidationFault(errors=collected)
