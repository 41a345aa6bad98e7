# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_task_usecase
from app.application.tasks.usecase import TaskUsecase
from app.common.result import unwrap
from app.domain import schemas


router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=schemas.Envelope[List[schemas.TaskOut]])
def list_tasks(
    completed: Optional[bool] = None,
    uc: TaskUsecase = Depends(get_task_usecase),
):
    return schemas.Envelope[List[schemas.TaskOut]](data=uc.list_tasks(completed=completed))


@router.post("", response_model=schemas.Envelope[schemas.TaskOut], status_code=201)
def create_task(
    req: schemas.TaskIn,
    uc: TaskUsecase = Depends(get_task_usecase),
):
    task = unwrap(uc.create_task(req.model_dump()))
    return schemas.Envelope[schemas.TaskOut](message="Task created", data=task)


@router.get("/{task_id}", response_model=schemas.Envelope[schemas.TaskOut])
def get_task(
    task_id: str,
    uc: TaskUsecase = Depends(get_task_usecase),
):
    return schemas.Envelope[schemas.TaskOut](data=unwrap(uc.get_task(task_id)))


@router.put("/{task_id}", response_model=schemas.Envelope[schemas.TaskOut])
def update_task(
    task_id: str,
    req: schemas.TaskIn,
    uc: TaskUsecase = Depends(get_task_usecase),
):
    task = unwrap(uc.update_task(task_id, req.model_dump(exclude_unset=True)))
    return schemas.Envelope[schemas.TaskOut](message="Task updated", data=task)


@router.delete("/{task_id}", response_model=schemas.MessageResponse)
def delete_task(
    task_id: str,
    uc: TaskUsecase = Depends(get_task_usecase),
):
    unwrap(uc.delete_task(task_id))
    return schemas.MessageResponse(message="Task deleted successfully")
