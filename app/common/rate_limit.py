# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""按客户端 IP 限流（slowapi）

限额只由各路由的 @limiter.limit 声明；超限时抛出 RateLimitExceeded，由全局异常处理归一化为 429。
"""

from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.infra.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)
