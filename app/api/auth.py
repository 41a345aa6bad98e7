# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.api.deps import get_auth_usecase, get_current_user, get_db
from app.application.auth.usecase import AuthUsecase
from app.common.rate_limit import limiter
from app.common.result import unwrap
from app.domain import models, schemas
from app.infra.config import settings


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=schemas.AuthResponse, status_code=201)
@limiter.limit(settings.RATE_LIMIT_AUTH)
def register(
    request: Request,
    req: schemas.RegisterRequest,
    db: Session = Depends(get_db),
    uc: AuthUsecase = Depends(get_auth_usecase),
):
    issued = unwrap(uc.register(db, user_name=req.user_name, email=req.email, password=req.password))
    return schemas.AuthResponse(
        message="User registered successfully",
        token=issued.token,
        data=schemas.UserOut.model_validate(issued.user),
    )


@router.post("/login", response_model=schemas.AuthResponse)
@limiter.limit(settings.RATE_LIMIT_AUTH)
def login(
    request: Request,
    req: schemas.LoginRequest,
    db: Session = Depends(get_db),
    uc: AuthUsecase = Depends(get_auth_usecase),
):
    issued = unwrap(uc.login(db, email=req.email, password=req.password))
    return schemas.AuthResponse(
        message="Logged in successfully",
        token=issued.token,
        data=schemas.UserOut.model_validate(issued.user),
    )


@router.get("/me", response_model=schemas.Envelope[schemas.UserOut])
def me(user: models.User = Depends(get_current_user)):
    return schemas.Envelope[schemas.UserOut](data=schemas.UserOut.model_validate(user))
