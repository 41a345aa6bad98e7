# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from app.common.logging import setup_logging
from app.infra.config import settings
from app.infra.db import engine, init_schema


def init_db() -> None:
    setup_logging(settings.LOG_LEVEL)
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)} ...")
    init_schema()
    print("Done.")


if __name__ == "__main__":
    init_db()
