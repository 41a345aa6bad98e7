# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from app.common.trace import get_trace_id

LOG_FORMAT = "[%(asctime)s - %(levelname)s - trace=%(trace_id)s - %(name)s - %(message)s]"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_LOG_MAX_BYTES = 5 * 1024 * 1024
ERROR_LOG_BACKUPS = 5
COMBINED_LOG_MAX_BYTES = 10 * 1024 * 1024
COMBINED_LOG_BACKUPS = 10


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        setattr(record, "trace_id", get_trace_id())
        return True


def _file_handler(path: str, level: int, max_bytes: int, backups: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_dir: Optional[str] = None) -> None:
    """初始化全局日志

    - 控制台输出全部日志
    - 配置 log_dir 时额外写入 error.log（仅 ERROR）与 combined.log（全部），按大小滚动
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        existing = {getattr(h, "baseFilename", None) for h in root.handlers}
        for name, file_level, max_bytes, backups in (
            ("error.log", logging.ERROR, ERROR_LOG_MAX_BYTES, ERROR_LOG_BACKUPS),
            ("combined.log", logging.NOTSET, COMBINED_LOG_MAX_BYTES, COMBINED_LOG_BACKUPS),
        ):
            path = os.path.abspath(os.path.join(log_dir, name))
            if path in existing:
                continue
            handler = _file_handler(path, file_level, max_bytes, backups)
            handler.setFormatter(formatter)
            root.addHandler(handler)

    # 给现有 handler 全部加 filter
    for h in root.handlers:
        has_filter = any(isinstance(f, TraceIdFilter) for f in getattr(h, "filters", []))
        if not has_filter:
            h.addFilter(TraceIdFilter())
