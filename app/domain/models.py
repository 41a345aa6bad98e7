# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import time
from typing import List, Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infra.db import Base


def _ts() -> int:
    return int(time.time())


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts)
    updated_at: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        default=None,
        onupdate=_ts,
    )

    books: Mapped[List["Book"]] = relationship("Book", back_populates="owner")


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    published_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    owner_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts)
    updated_at: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        default=None,
        onupdate=_ts,
    )

    owner: Mapped[Optional["User"]] = relationship("User", back_populates="books")
