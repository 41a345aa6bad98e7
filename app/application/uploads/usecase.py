# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import os
import time
from typing import List, Sequence

from fastapi import UploadFile

from app.common.errors import BadRequestError
from app.domain import schemas
from app.infra import storage
from app.infra.config import settings

ALLOWED_MIME_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")

INVALID_TYPE_MESSAGE = "Invalid file type. Only JPEG, PNG, GIF, WEBP are allowed."


class UploadUsecase:
    def __init__(self, max_bytes: int = 0, max_files: int = 0) -> None:
        self._max_bytes = max_bytes or int(settings.UPLOAD_MAX_BYTES)
        self._max_files = max_files or int(settings.UPLOAD_MAX_FILES)

    async def save_one(self, file: UploadFile | None, *, base_url: str) -> schemas.UploadedFile:
        if file is None or not file.filename:
            raise BadRequestError("No File Uploaded")
        data = await self._read_checked(file)
        return self._store(file, data, base_url)

    async def save_many(self, files: Sequence[UploadFile] | None, *, base_url: str) -> List[schemas.UploadedFile]:
        files = [f for f in (files or []) if f is not None and f.filename]
        if not files:
            raise BadRequestError("No files uploaded.")
        if len(files) > self._max_files:
            raise BadRequestError(f"Too many files. Max {self._max_files} allowed.")

        # 全部文件的类型和大小校验通过后才开始写入
        for f in files:
            self._check_type(f)
        contents = [await self._read_checked(f) for f in files]
        return [self._store(f, data, base_url) for f, data in zip(files, contents)]

    def _check_type(self, file: UploadFile) -> None:
        if file.content_type not in ALLOWED_MIME_TYPES:
            raise BadRequestError(INVALID_TYPE_MESSAGE)

    async def _read_checked(self, file: UploadFile) -> bytes:
        self._check_type(file)
        data = await file.read()
        if len(data) > self._max_bytes:
            raise BadRequestError(f"File size too large. Max {_format_size(self._max_bytes)} allowed.")
        return data

    def _store(self, file: UploadFile, data: bytes, base_url: str) -> schemas.UploadedFile:
        file_name = f"{int(time.time() * 1000)}-{os.path.basename(file.filename or 'upload')}"
        location = storage.save_bytes(file_name, data, file.content_type or "application/octet-stream")
        return schemas.UploadedFile(
            file_name=file_name,
            file_path=location,
            file_url=storage.build_url(file_name, base_url),
            file_mime_type=file.content_type or "",
            file_size=len(data),
        )


def _format_size(size: int) -> str:
    mb = 1024 * 1024
    if size >= mb and size % mb == 0:
        return f"{size // mb}MB"
    return f"{size} bytes"
