# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.api.deps import get_current_user, get_upload_usecase
from app.application.uploads.usecase import UploadUsecase
from app.common.rate_limit import limiter
from app.domain import models, schemas
from app.infra.config import settings


router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_model=schemas.Envelope[schemas.UploadedFile])
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def upload_single(
    request: Request,
    image: Optional[UploadFile] = File(None),
    user: models.User = Depends(get_current_user),  # noqa: ARG001
    uc: UploadUsecase = Depends(get_upload_usecase),
):
    saved = await uc.save_one(image, base_url=str(request.base_url))
    return schemas.Envelope[schemas.UploadedFile](message="File uploaded successfully!", data=saved)


@router.post("/multiple", response_model=schemas.UploadListResponse)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def upload_multiple(
    request: Request,
    image: Optional[List[UploadFile]] = File(None),
    user: models.User = Depends(get_current_user),  # noqa: ARG001
    uc: UploadUsecase = Depends(get_upload_usecase),
):
    saved = await uc.save_many(image, base_url=str(request.base_url))
    return schemas.UploadListResponse(message=f"{len(saved)} files uploaded successfully!", data=saved)
