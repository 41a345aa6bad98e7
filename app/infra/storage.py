# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

"""上传文件存储（AWS S3 / MinIO，未配置时落本地）

- 为了让项目在 "只配置数据库" 的情况下也能跑起来，S3 客户端延迟初始化。
- 本地文件由 FastAPI StaticFiles 挂载在 /uploads 下对外提供。
"""

import logging
import os
from typing import Optional

import boto3
from botocore.client import Config

from app.infra.config import settings

logger = logging.getLogger(__name__)

UPLOAD_PREFIX = "uploads"

_s3_client: Optional[object] = None


def use_s3() -> bool:
    return bool(
        settings.AWS_ACCESS_KEY_ID
        and settings.AWS_SECRET_ACCESS_KEY
        and settings.AWS_S3_BUCKET
        and settings.AWS_S3_BASE_URL
    )


def upload_dir() -> str:
    return os.path.join(settings.FILE_BASE_PATH or "./data", UPLOAD_PREFIX)


def _get_s3():
    global _s3_client
    if _s3_client is None:
        session = boto3.session.Session(
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION or None,
        )
        _s3_client = session.client(
            "s3",
            endpoint_url=settings.AWS_S3_ENDPOINT_URL or None,
            config=Config(s3={"addressing_style": "virtual"}),
        )
    return _s3_client


def save_bytes(file_name: str, data: bytes, content_type: str) -> str:
    """保存文件，返回存储位置（S3 key 或本地路径）"""
    if use_s3():
        key = f"{UPLOAD_PREFIX}/{file_name}"
        logger.info("Upload to S3: bucket=%s, key=%s, size=%s", settings.AWS_S3_BUCKET, key, len(data))
        _get_s3().put_object(
            Bucket=settings.AWS_S3_BUCKET,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
        return key

    # fallback: local file
    dst = os.path.join(upload_dir(), file_name)
    os.makedirs(os.path.dirname(dst), exist_ok=True)
    with open(dst, "wb") as f:
        f.write(data)
    logger.info("Upload to Local: path=%s size=%s", dst, len(data))
    return dst


def build_url(file_name: str, base_url: str) -> str:
    if use_s3():
        return f"{settings.AWS_S3_BASE_URL.rstrip('/')}/{UPLOAD_PREFIX}/{file_name}"
    return f"{base_url.rstrip('/')}/{UPLOAD_PREFIX}/{file_name}"
