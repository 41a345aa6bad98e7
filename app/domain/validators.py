# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""存储边界的字段校验

返回 字段 -> 错误描述；为空表示通过。partial=True 用于更新，只校验出现的字段。
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Mapping

MIN_PUBLISHED_YEAR = 1000
MIN_PASSWORD_LENGTH = 8


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required(errors: Dict[str, str], data: Mapping[str, Any], name: str, partial: bool) -> None:
    if partial and name not in data:
        return
    if _blank(data.get(name)):
        errors[name] = f"{name} is required"


def validate_book(data: Mapping[str, Any], *, partial: bool = False) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _required(errors, data, "title", partial)
    _required(errors, data, "author", partial)

    year = data.get("published_year")
    if year is not None:
        max_year = dt.date.today().year
        if year < MIN_PUBLISHED_YEAR:
            errors["published_year"] = f"published_year must be at least {MIN_PUBLISHED_YEAR}"
        elif year > max_year:
            errors["published_year"] = f"published_year must not be later than {max_year}"
    return errors


def validate_task(data: Mapping[str, Any], *, partial: bool = False) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _required(errors, data, "title", partial)
    return errors


def validate_post(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _required(errors, data, "title", False)
    _required(errors, data, "content", False)
    return errors


def validate_user(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _required(errors, data, "user_name", False)
    _required(errors, data, "email", False)
    _required(errors, data, "password", False)

    email = data.get("email")
    if "email" not in errors and "@" not in str(email):
        errors["email"] = "email must be a valid email address"

    password = data.get("password")
    if "password" not in errors and len(str(password)) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors


def strip_strings(data: Mapping[str, Any]) -> Dict[str, Any]:
    """对字符串字段做 trim"""
    return {k: (v.strip() if isinstance(v, str) else v) for k, v in data.items()}
