# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.common.faults import DuplicateKeyFault
from app.common.result import Err, Ok, Result
from app.domain import models

UNIQUE_FIELDS = ("email", "user_name")


class UserRepository:
    def get(self, db: Session, user_id: int) -> Optional[models.User]:
        return db.get(models.User, user_id)

    def find_by_email(self, db: Session, email: str) -> Optional[models.User]:
        return db.scalars(select(models.User).where(models.User.email == email)).first()

    def find_conflict(self, db: Session, *, email: str, user_name: str) -> Optional[models.User]:
        stmt = select(models.User).where(or_(models.User.email == email, models.User.user_name == user_name))
        return db.scalars(stmt).first()

    def create(self, db: Session, *, user_name: str, email: str, password_hash: str) -> Result[models.User]:
        user = models.User(user_name=user_name, email=email, password_hash=password_hash)
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            return Err(DuplicateKeyFault(key_value=self._conflicting_values(db, email=email, user_name=user_name)))
        db.refresh(user)
        return Ok(user)

    def _conflicting_values(self, db: Session, *, email: str, user_name: str) -> Dict[str, Any]:
        """并发注册时唯一约束冲突：找出具体冲突的字段"""
        existing = self.find_conflict(db, email=email, user_name=user_name)
        if existing is None:
            return {}
        wanted = {"email": email, "user_name": user_name}
        return {f: wanted[f] for f in UNIQUE_FIELDS if getattr(existing, f) == wanted[f]}
