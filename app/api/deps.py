# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.application.auth.token_service import TokenService
from app.application.auth.usecase import AuthUsecase
from app.application.books.usecase import BookUsecase
from app.application.posts.usecase import PostUsecase
from app.application.tasks.usecase import TaskUsecase
from app.application.uploads.usecase import UploadUsecase
from app.domain import models
from app.infra.book_repository import BookRepository
from app.infra.config import settings
from app.infra.db import SessionLocal
from app.infra.post_store import PostStore
from app.infra.task_store import TaskStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

_token_singleton = TokenService()
_auth_uc_singleton = AuthUsecase(_token_singleton)
_book_uc_singleton = BookUsecase(BookRepository())
_task_uc_singleton = TaskUsecase(TaskStore(settings.TASKS_FILE))
_post_store_singleton = PostStore()
_post_uc_singleton = PostUsecase(_post_store_singleton)
_upload_uc_singleton = UploadUsecase()


def get_auth_usecase() -> AuthUsecase:
    return _auth_uc_singleton


def get_book_usecase() -> BookUsecase:
    return _book_uc_singleton


def get_task_usecase() -> TaskUsecase:
    return _task_uc_singleton


def get_post_usecase() -> PostUsecase:
    return _post_uc_singleton


def get_upload_usecase() -> UploadUsecase:
    return _upload_uc_singleton

_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    uc: AuthUsecase = Depends(get_auth_usecase),
) -> models.User:
    token = credentials.credentials if credentials is not None else None
    user = uc.authenticate(db, token)
    request.state.user = user
    return user
