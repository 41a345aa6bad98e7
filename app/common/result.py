# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.common.errors import AppError
from app.common.faults import Fault, FaultError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: Union[Fault, AppError]


Result = Union[Ok[T], Err]


def unwrap(result: Result[T]) -> T:
    """取出结果；故障交给全局异常处理"""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result.error, AppError):
        raise result.error
    raise FaultError(result.error)
