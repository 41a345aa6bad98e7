# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""数据层故障类型

存储层在边界处只产出这几种故障，错误归一化按类型匹配，不再去猜测异常上的字段。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class CastFault:
    """资源 id 等无法转换为目标类型"""
    field: str
    value: Any


@dataclass(frozen=True)
class ValidationFault:
    """字段校验失败，errors: 字段 -> 错误描述（保持插入顺序）"""
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DuplicateKeyFault:
    """唯一约束冲突，key_value: 冲突字段 -> 值"""
    key_value: Dict[str, Any] = field(default_factory=dict)


Fault = Union[CastFault, ValidationFault, DuplicateKeyFault]


class FaultError(Exception):
    """HTTP 层把故障交给全局异常处理时使用的载体"""

    def __init__(self, fault: Fault) -> None:
        super().__init__(repr(fault))
        self.fault = fault
