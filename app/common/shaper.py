# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from app.common.errors import AppError

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Something went wrong! Please try again later."


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Environment":
        """dev / development -> DEVELOPMENT，其余一律按生产处理"""
        if (value or "").strip().lower() in {"dev", "development"}:
            return cls.DEVELOPMENT
        return cls.PRODUCTION


@dataclass(frozen=True)
class ShapedResponse:
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    def to_response(self, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body, headers=headers)


GENERIC_RESPONSE = ShapedResponse(
    status_code=500,
    body={"success": False, "status": "error", "message": GENERIC_MESSAGE},
)


def shape(error: AppError, environment: Environment) -> ShapedResponse:
    """按运行环境渲染错误响应体；本函数不抛异常"""
    try:
        if environment == Environment.DEVELOPMENT:
            shaped = ShapedResponse(
                status_code=error.status_code,
                body={
                    "success": False,
                    "status": error.status,
                    "message": error.message,
                    "stack": error.stack,
                    "error": error.to_dict(),
                },
            )
        elif error.is_operational:
            shaped = ShapedResponse(
                status_code=error.status_code,
                body={"success": False, "status": error.status, "message": error.message},
            )
        else:
            return GENERIC_RESPONSE

        # 提前序列化一次，渲染阶段不能再失败
        json.dumps(shaped.body, ensure_ascii=False, allow_nan=False)
        return shaped
    except Exception:  # noqa: BLE001
        logger.warning("Failed to shape error response, using generic body", exc_info=True)
        return GENERIC_RESPONSE
