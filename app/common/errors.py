# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import traceback
from typing import Any, Dict, Optional


def status_for(status_code: int) -> str:
    """4xx -> fail, 其余 -> error"""
    return "fail" if 400 <= int(status_code) < 500 else "error"


class AppError(Exception):
    """异常统一

    is_operational=True 表示由业务代码主动抛出，message 可以直接返回给用户。
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        *,
        is_operational: bool = True,
        detail: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.status = status_for(self.status_code)
        self.is_operational = is_operational
        self.detail = detail

    @property
    def stack(self) -> str:
        origin: BaseException = self.__cause__ or self
        lines = traceback.format_exception(type(origin), origin, origin.__traceback__)
        return "".join(lines).rstrip()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "status_code": self.status_code,
            "status": self.status,
            "message": self.message,
            "is_operational": self.is_operational,
        }
        if self.detail is not None:
            data["detail"] = self.detail
        if self.__cause__ is not None:
            data["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code})"


class BadRequestError(AppError):
    def __init__(self, message: str = "bad request", detail: Any = None) -> None:
        super().__init__(message, 400, detail=detail)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "unauthorized", detail: Any = None) -> None:
        super().__init__(message, 401, detail=detail)


class ForbiddenError(AppError):
    def __init__(self, message: str = "forbidden", detail: Any = None) -> None:
        super().__init__(message, 403, detail=detail)


class NotFoundError(AppError):
    def __init__(self, message: str = "not found", detail: Any = None) -> None:
        super().__init__(message, 404, detail=detail)


class ConflictError(AppError):
    def __init__(self, message: str = "conflict", detail: Any = None) -> None:
        super().__init__(message, 409, detail=detail)


class TooManyRequestsError(AppError):
    def __init__(self, message: str = "too many requests", detail: Any = None) -> None:
        super().__init__(message, 429, detail=detail)
