# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_post_usecase
from app.application.posts.usecase import PostUsecase
from app.common.result import unwrap
from app.domain import models, schemas


router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=schemas.Envelope[List[schemas.PostOut]])
def list_posts(uc: PostUsecase = Depends(get_post_usecase)):
    return schemas.Envelope[List[schemas.PostOut]](data=uc.list_posts())


@router.post("", response_model=schemas.Envelope[schemas.PostOut], status_code=201)
def create_post(
    req: schemas.PostIn,
    user: models.User = Depends(get_current_user),
    uc: PostUsecase = Depends(get_post_usecase),
):
    post = unwrap(uc.create_post(author=user, data=req.model_dump()))
    return schemas.Envelope[schemas.PostOut](message="Post created", data=post)


@router.get("/{post_id}", response_model=schemas.Envelope[schemas.PostOut])
def get_post(post_id: str, uc: PostUsecase = Depends(get_post_usecase)):
    return schemas.Envelope[schemas.PostOut](data=unwrap(uc.get_post(post_id)))


@router.delete("/{post_id}", response_model=schemas.MessageResponse)
def delete_post(
    post_id: str,
    user: models.User = Depends(get_current_user),
    uc: PostUsecase = Depends(get_post_usecase),
):
    unwrap(uc.delete_post(user=user, post_id=post_id))
    return schemas.MessageResponse(message="Post deleted successfully")
