# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import jwt

from app.infra.config import settings


class TokenService:
    """签发/校验 access token

    decode 失败时直接抛出 PyJWT 的异常（过期 / 无效），由全局异常处理归一化为 401。
    """

    def __init__(self, secret: Optional[str] = None, expires_minutes: Optional[int] = None) -> None:
        self._jwt_secret = secret or settings.JWT_SECRET_KEY
        self._jwt_alg = "HS256"
        self._expires_minutes = int(expires_minutes or settings.JWT_EXPIRES_MINUTES)

    @property
    def expires_in(self) -> int:
        return self._expires_minutes * 60

    def make_access_token(self, *, user_id: int, user_name: str, now: Optional[int] = None) -> str:
        issued_at = int(time.time()) if now is None else int(now)
        payload: Dict[str, Any] = {
            "sub": str(user_id),
            "name": user_name,
            "type": "access",
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self._jwt_secret, algorithm=self._jwt_alg)

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        payload = jwt.decode(token, self._jwt_secret, algorithms=[self._jwt_alg])
        if payload.get("type") != "access":
            raise jwt.InvalidTokenError("not an access token")
        return payload

    def subject_id(self, payload: Dict[str, Any]) -> int:
        try:
            return int(payload.get("sub"))
        except (TypeError, ValueError) as e:
            raise jwt.InvalidTokenError("invalid subject") from e
