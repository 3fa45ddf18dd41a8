"""API 层调用方上下文解析.

请求中间件已把 `X-User-Id` / `X-User-Role` 写入 contextvars,
这里将其收敛为显式的 CallerContext 传给 service.
"""

from __future__ import annotations

from pinkstar.types.context import CallerContext
from pinkstar.utils.logging.context_vars import user_id_var, user_role_var


def resolve_caller_context() -> CallerContext:
    """从当前请求上下文解析调用方,缺失或非法时按匿名用户处理."""
    return CallerContext.from_raw(user_id_var.get(), user_role_var.get())
