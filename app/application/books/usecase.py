# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from app.common.result import Ok, Result
from app.domain import models
from app.infra.book_repository import BookRepository

logger = logging.getLogger(__name__)


class BookUsecase:
    def __init__(self, books: BookRepository) -> None:
        self._books = books

    def list_books(self, db: Session) -> List[models.Book]:
        return self._books.list(db)

    def get_book(self, db: Session, book_id: Any) -> Result[models.Book]:
        return self._books.get(db, book_id)

    def create_book(self, db: Session, *, owner: models.User, data: Mapping[str, Any]) -> Result[models.Book]:
        result = self._books.create(db, data, owner_id=owner.id)
        if isinstance(result, Ok):
            logger.info("Book created: id=%s owner=%s", result.value.id, owner.id)
        return result

    def update_book(self, db: Session, book_id: Any, data: Mapping[str, Any]) -> Result[models.Book]:
        return self._books.update(db, book_id, data)

    def delete_book(self, db: Session, book_id: Any) -> Result[models.Book]:
        result = self._books.delete(db, book_id)
        if isinstance(result, Ok):
            logger.info("Book deleted: id=%s", result.value.id)
        return result
