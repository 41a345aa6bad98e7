# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
领域层：

- models: ORM 实体（User / Book）
- schemas: Pydantic 请求/响应模型
- validators: 存储边界的字段校验
"""
from . import models, schemas, validators  # noqa: F401

__all__ = ["models", "schemas", "validators"]
