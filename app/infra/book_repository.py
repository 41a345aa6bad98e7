# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.common.errors import NotFoundError
from app.common.faults import ValidationFault
from app.common.result import Err, Ok, Result
from app.domain import models
from app.domain.validators import strip_strings, validate_book
from app.infra.ids import parse_id

BOOK_FIELDS = ("title", "author", "published_year")


class BookRepository:
    def list(self, db: Session) -> List[models.Book]:
        stmt = select(models.Book).order_by(models.Book.id.asc())
        return list(db.scalars(stmt).all())

    def get(self, db: Session, raw_id: Any) -> Result[models.Book]:
        parsed = parse_id(raw_id)
        if isinstance(parsed, Err):
            return parsed
        book = db.get(models.Book, parsed.value)
        if book is None:
            return Err(NotFoundError("Book not found"))
        return Ok(book)

    def create(self, db: Session, data: Mapping[str, Any], *, owner_id: Optional[int] = None) -> Result[models.Book]:
        values = strip_strings({k: data.get(k) for k in BOOK_FIELDS})
        errors = validate_book(values)
        if errors:
            return Err(ValidationFault(errors=errors))

        book = models.Book(owner_id=owner_id, **values)
        db.add(book)
        db.commit()
        db.refresh(book)
        return Ok(book)

    def update(self, db: Session, raw_id: Any, data: Mapping[str, Any]) -> Result[models.Book]:
        found = self.get(db, raw_id)
        if isinstance(found, Err):
            return found

        values = strip_strings({k: v for k, v in data.items() if k in BOOK_FIELDS})
        errors = validate_book(values, partial=True)
        if errors:
            return Err(ValidationFault(errors=errors))

        book = found.value
        for key, value in values.items():
            setattr(book, key, value)
        db.add(book)
        db.commit()
        db.refresh(book)
        return Ok(book)

    def delete(self, db: Session, raw_id: Any) -> Result[models.Book]:
        found = self.get(db, raw_id)
        if isinstance(found, Err):
            return found
        db.delete(found.value)
        db.commit()
        return found

