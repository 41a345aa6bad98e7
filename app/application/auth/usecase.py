# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from app.application.auth.passwords import hash_password, verify_password
from app.application.auth.token_service import TokenService
from app.common.errors import BadRequestError, ConflictError, UnauthorizedError
from app.common.faults import ValidationFault
from app.common.result import Err, Ok, Result
from app.domain import models
from app.domain.validators import strip_strings, validate_user
from app.infra.user_repository import UserRepository

NOT_LOGGED_IN_MESSAGE = "You are not logged in! Please log in to get access"
USER_GONE_MESSAGE = "The user belonging to this token no longer exists."


@dataclass
class IssuedToken:
    user: models.User
    token: str
    expires_in: int


class AuthUsecase:
    def __init__(self, tokens: TokenService, users: Optional[UserRepository] = None) -> None:
        self._tokens = tokens
        self._users = users or UserRepository()

    def register(
        self,
        db: Session,
        *,
        user_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> Result[IssuedToken]:
        values = strip_strings({"user_name": user_name, "email": email})
        values["password"] = password
        errors = validate_user(values)
        if errors:
            return Err(ValidationFault(errors=errors))

        existed = self._users.find_conflict(db, email=values["email"], user_name=values["user_name"])
        if existed is not None:
            if existed.email == values["email"]:
                return Err(ConflictError("User with this email already exist"))
            return Err(ConflictError("User with this username already exist."))

        created = self._users.create(
            db,
            user_name=values["user_name"],
            email=values["email"],
            password_hash=hash_password(password or ""),
        )
        if isinstance(created, Err):
            return created
        return Ok(self._issue(created.value))

    def login(self, db: Session, *, email: Optional[str], password: Optional[str]) -> Result[IssuedToken]:
        if not email or not password:
            return Err(BadRequestError("Please provide an email and password"))

        user = self._users.find_by_email(db, email.strip())
        if user is None or not verify_password(password, user.password_hash):
            return Err(UnauthorizedError("Invalid credentials"))
        return Ok(self._issue(user))

    def authenticate(self, db: Session, token: Optional[str]) -> models.User:
        """Unauthenticated -> Authenticated

        token 校验失败时 PyJWT 异常原样抛出；用户不存在时 401。
        """
        if not token:
            raise UnauthorizedError(NOT_LOGGED_IN_MESSAGE)

        payload = self._tokens.decode_access_token(token)
        user = self._users.get(db, self._tokens.subject_id(payload))
        if user is None:
            raise UnauthorizedError(USER_GONE_MESSAGE)
        return user

    def _issue(self, user: models.User) -> IssuedToken:
        token = self._tokens.make_access_token(user_id=user.id, user_name=user.user_name)
        return IssuedToken(user=user, token=token, expires_in=self._tokens.expires_in)
