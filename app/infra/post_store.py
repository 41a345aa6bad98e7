# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import itertools
import time
from typing import Any, Dict, List, Mapping

from app.common.errors import NotFoundError
from app.common.faults import ValidationFault
from app.common.result import Err, Ok, Result
from app.domain.validators import strip_strings, validate_post
from app.infra.ids import parse_id


class PostStore:
    """文章存储（进程内存，重启即丢失）"""

    def __init__(self) -> None:
        self._posts: List[Dict[str, Any]] = []
        self._ids = itertools.count(1)

    def list(self) -> List[Dict[str, Any]]:
        return list(self._posts)

    def get(self, raw_id: Any) -> Result[Dict[str, Any]]:
        parsed = parse_id(raw_id)
        if isinstance(parsed, Err):
            return parsed
        for post in self._posts:
            if post["id"] == parsed.value:
                return Ok(post)
        return Err(NotFoundError("Post not found"))

    def create(self, data: Mapping[str, Any], *, author_id: int) -> Result[Dict[str, Any]]:
        values = strip_strings({"title": data.get("title"), "content": data.get("content")})
        errors = validate_post(values)
        if errors:
            return Err(ValidationFault(errors=errors))

        post = {
            "id": next(self._ids),
            "title": values["title"],
            "content": values["content"],
            "author_id": author_id,
            "created_at": int(time.time()),
        }
        self._posts.append(post)
        return Ok(post)

    def delete(self, post_id: int) -> None:
        self._posts = [p for p in self._posts if p["id"] != post_id]

    def clear(self) -> None:
        self._posts.clear()
        self._ids = itertools.count(1)
