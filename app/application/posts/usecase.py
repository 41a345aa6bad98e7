# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from app.common.errors import ForbiddenError
from app.common.result import Err, Ok, Result
from app.domain import models
from app.infra.post_store import PostStore


class PostUsecase:
    def __init__(self, store: PostStore) -> None:
        self._store = store

    def list_posts(self) -> List[Dict[str, Any]]:
        return self._store.list()

    def get_post(self, post_id: Any) -> Result[Dict[str, Any]]:
        return self._store.get(post_id)

    def create_post(self, *, author: models.User, data: Mapping[str, Any]) -> Result[Dict[str, Any]]:
        return self._store.create(data, author_id=author.id)

    def delete_post(self, *, user: models.User, post_id: Any) -> Result[Dict[str, Any]]:
        found = self._store.get(post_id)
        if isinstance(found, Err):
            return found
        if found.value["author_id"] != user.id:
            return Err(ForbiddenError("You do not have permission to delete this post"))
        self._store.delete(found.value["id"])
        return Ok(found.value)
