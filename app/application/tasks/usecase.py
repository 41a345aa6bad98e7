# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from app.common.result import Result
from app.infra.task_store import TaskStore


class TaskUsecase:
    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def list_tasks(self, *, completed: bool | None = None) -> List[Dict[str, Any]]:
        tasks = self._store.list()
        if completed is None:
            return tasks
        return [t for t in tasks if bool(t.get("completed")) == completed]

    def get_task(self, task_id: Any) -> Result[Dict[str, Any]]:
        return self._store.get(task_id)

    def create_task(self, data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
        return self._store.create(data)

    def update_task(self, task_id: Any, data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
        return self._store.update(task_id, data)

    def delete_task(self, task_id: Any) -> Result[Dict[str, Any]]:
        return self._store.delete(task_id)
