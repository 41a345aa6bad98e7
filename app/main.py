# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api import auth as auth_api, books as books_api, posts as posts_api, tasks as tasks_api, upload as upload_api
from app.common.exception_handlers import register_error_handlers
from app.common.logging import setup_logging
from app.common.middlewares import ErrorHandlingMiddleware, TraceIdMiddleware
from app.common.rate_limit import limiter
from app.common.shaper import Environment
from app.infra import storage
from app.infra.config import settings
from app.infra.db import init_schema


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_schema()
    yield


def create_app(environment: Optional[Environment] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    app = FastAPI(
        title="shelf-api",
        version="1.0.0",
        lifespan=lifespan,
    )
    # 错误响应的详细程度只看这里，不在处理过程中读取环境变量
    app.state.environment = environment or Environment.parse(settings.ENV)
    app.state.limiter = limiter

    # 本地上传文件服务（未配置 S3 时文件落本地）
    os.makedirs(storage.upload_dir(), exist_ok=True)
    app.mount(f"/{storage.UPLOAD_PREFIX}", StaticFiles(directory=storage.upload_dir()), name="uploads")

    # ---------- middlewares / handlers ----------
    # 后添加的在外层：TraceId -> ErrorHandling -> 路由
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(TraceIdMiddleware)

    register_error_handlers(app)

    @app.get("/health")
    def health_check() -> dict:
        return {"status": "ok"}

    app.include_router(auth_api.router)
    app.include_router(books_api.router)
    app.include_router(tasks_api.router)
    app.include_router(posts_api.router)
    app.include_router(upload_api.router)
    return app


app = create_app()
