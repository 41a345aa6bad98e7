# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""任务存储（单个 JSON 文件）

读-改-写整文件，没有加锁：并发写可能丢更新，只适合演示/单进程场景。
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from app.common.errors import NotFoundError
from app.common.faults import ValidationFault
from app.common.result import Err, Ok, Result
from app.domain.validators import strip_strings, validate_task
from app.infra.ids import parse_id

logger = logging.getLogger(__name__)

TASK_FIELDS = ("title", "completed")


class TaskStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    def list(self) -> List[Dict[str, Any]]:
        return self._read()

    def get(self, raw_id: Any) -> Result[Dict[str, Any]]:
        parsed = parse_id(raw_id)
        if isinstance(parsed, Err):
            return parsed
        for task in self._read():
            if task.get("id") == parsed.value:
                return Ok(task)
        return Err(NotFoundError("Task not found"))

    def create(self, data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
        values = strip_strings({k: data.get(k) for k in TASK_FIELDS})
        errors = validate_task(values)
        if errors:
            return Err(ValidationFault(errors=errors))

        tasks = self._read()
        task = {
            "id": max((t.get("id", 0) for t in tasks), default=0) + 1,
            "title": values["title"],
            "completed": bool(values.get("completed") or False),
            "created_at": int(time.time()),
            "updated_at": None,
        }
        tasks.append(task)
        self._write(tasks)
        return Ok(task)

    def update(self, raw_id: Any, data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
        found = self.get(raw_id)
        if isinstance(found, Err):
            return found

        values = strip_strings({k: v for k, v in data.items() if k in TASK_FIELDS})
        errors = validate_task(values, partial=True)
        if errors:
            return Err(ValidationFault(errors=errors))

        tasks = self._read()
        for task in tasks:
            if task.get("id") == found.value["id"]:
                task.update(values)
                task["completed"] = bool(task.get("completed"))
                task["updated_at"] = int(time.time())
                self._write(tasks)
                return Ok(task)
        return Err(NotFoundError("Task not found"))

    def delete(self, raw_id: Any) -> Result[Dict[str, Any]]:
        found = self.get(raw_id)
        if isinstance(found, Err):
            return found
        tasks = [t for t in self._read() if t.get("id") != found.value["id"]]
        self._write(tasks)
        return found

    def _read(self) -> List[Dict[str, Any]]:
        if not self._path.exists():
            return []
        text = self._path.read_text(encoding="utf-8").strip()
        if not text:
            return []
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"tasks file {self._path} must contain a JSON array")
        return data

    def _write(self, tasks: List[Dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(tasks, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Wrote %d tasks to %s", len(tasks), self._path)
