# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（错误/日志/trace/限流）

约定：
- Router 不写错误响应：错误统一抛出（AppError / FaultError / 其他异常），
  由全局异常处理归一化、记录日志并渲染为标准响应
- 每个失败请求只产生一次日志、一次响应
- trace_id 通过 middleware 注入，并写入日志，便于线上排障
"""

from __future__ import annotations
