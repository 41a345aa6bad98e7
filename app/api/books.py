# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_book_usecase, get_current_user, get_db
from app.application.books.usecase import BookUsecase
from app.common.result import unwrap
from app.domain import models, schemas


router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=schemas.Envelope[List[schemas.BookOut]])
def list_books(
    db: Session = Depends(get_db),
    uc: BookUsecase = Depends(get_book_usecase),
):
    books = uc.list_books(db)
    return schemas.Envelope[List[schemas.BookOut]](data=[schemas.BookOut.model_validate(b) for b in books])


@router.post("", response_model=schemas.Envelope[schemas.BookOut], status_code=201)
def create_book(
    req: schemas.BookIn,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
    uc: BookUsecase = Depends(get_book_usecase),
):
    book = unwrap(uc.create_book(db, owner=user, data=req.model_dump()))
    return schemas.Envelope[schemas.BookOut](message="Book created", data=schemas.BookOut.model_validate(book))


# book_id 按字符串接收，格式错误由存储层转换为 CastFault
@router.get("/{book_id}", response_model=schemas.Envelope[schemas.BookOut])
def get_book(
    book_id: str,
    db: Session = Depends(get_db),
    uc: BookUsecase = Depends(get_book_usecase),
):
    book = unwrap(uc.get_book(db, book_id))
    return schemas.Envelope[schemas.BookOut](data=schemas.BookOut.model_validate(book))


@router.put("/{book_id}", response_model=schemas.Envelope[schemas.BookOut])
def update_book(
    book_id: str,
    req: schemas.BookIn,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),  # noqa: ARG001
    uc: BookUsecase = Depends(get_book_usecase),
):
    book = unwrap(uc.update_book(db, book_id, req.model_dump(exclude_unset=True)))
    return schemas.Envelope[schemas.BookOut](message="Book updated", data=schemas.BookOut.model_validate(book))


@router.delete("/{book_id}", response_model=schemas.MessageResponse)
def delete_book(
    book_id: str,
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),  # noqa: ARG001
    uc: BookUsecase = Depends(get_book_usecase),
):
    unwrap(uc.delete_book(db, book_id))
    return schemas.MessageResponse(message="Book deleted successfully")
