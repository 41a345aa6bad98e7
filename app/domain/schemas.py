# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""请求/响应模型

请求体字段大多为可选：必填、范围等规则由 validators 在存储边界统一校验，
这里只负责类型。
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ---------- auth ----------

class RegisterRequest(BaseModel):
    user_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    email: str


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    data: UserOut


# ---------- books ----------

class BookIn(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    published_year: Optional[int] = None


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    published_year: Optional[int] = None
    owner_id: Optional[int] = None
    created_at: int
    updated_at: Optional[int] = None


# ---------- tasks ----------

class TaskIn(BaseModel):
    title: Optional[str] = None
    completed: Optional[bool] = None


class TaskOut(BaseModel):
    id: int
    title: str
    completed: bool = False
    created_at: int
    updated_at: Optional[int] = None


# ---------- posts ----------

class PostIn(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    created_at: int


# ---------- upload ----------

class UploadedFile(BaseModel):
    file_name: str
    file_path: str
    file_url: str
    file_mime_type: str
    file_size: int


class UploadListResponse(BaseModel):
    success: bool = True
    message: str
    data: List[UploadedFile]
