# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import os
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from app.infra.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy ORM 基类"""


def _engine_kwargs(url: str) -> Dict[str, Any]:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    database = parsed.database or ""
    if database in ("", ":memory:"):
        # 内存库：所有连接共享同一个连接，否则每个连接看到的是不同的库
        kwargs["poolclass"] = StaticPool
    else:
        folder = os.path.dirname(os.path.abspath(database))
        os.makedirs(folder, exist_ok=True)
    return kwargs


engine = create_engine(settings.DATABASE_URL, echo=False, **_engine_kwargs(settings.DATABASE_URL))

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def init_schema() -> None:
    """建表（开发/测试环境；线上使用 alembic）"""
    from app.domain import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

