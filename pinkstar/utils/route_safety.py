"""路由安全执行与结构化日志助手.

提供 `log_with_context` 与 `safe_route_call` 两个 helper,用于复用结构化日志字段,
并集中处理 API 层的异常捕获.

说明:
- 资源查询核心是纯读操作,这里不做 commit;异常时只回滚 session,释放可能残留的事务.
- 底层存储异常(SQLAlchemyError)在此处统一转换为 DatabaseError,其余未预期异常转换为 fallback 异常.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypeVar, Unpack, cast

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from pinkstar import db
from pinkstar.errors import AppError, DatabaseError, SystemError
from pinkstar.utils.logging.context_vars import user_id_var
from pinkstar.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from pinkstar.types.structures import ContextDict, ContextMapping, LoggerExtra, RouteSafetyOptions

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error", "critical"]
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    context: ContextMapping | None = None,
    extra: LoggerExtra | None = None,
    logger_name: str = "app",
) -> None:
    """记录带有统一上下文字段的结构化日志.

    Args:
        level: 日志级别,使用 structlog 的方法名,例如 "info", "error".
        event: 日志事件描述.
        module: 所属模块或领域,用于快速过滤.
        action: 当前操作名称,通常对应资源方法名.
        context: 业务上下文(如查询参数).
        extra: 额外诊断字段.
        logger_name: logger 名称.

    """
    payload: ContextDict = {"module": module, "action": action}
    actor_id = user_id_var.get()
    if actor_id is not None:
        payload["actor_id"] = actor_id
    if context:
        payload.update(context)
    if extra:
        payload.update(extra)

    logger = get_logger(logger_name)
    log_method = getattr(logger, level, logger.error)
    log_method(event, **payload)


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    **options: Unpack[RouteSafetyOptions],
) -> R:
    """安全执行视图逻辑,集中处理日志与异常转换.

    Args:
        func: 真实的业务函数,建议为局部闭包以捕获参数.
        module: 记录日志用的模块名称.
        action: 业务动作名称,例如 "list_resources".
        public_error: 暴露给客户端的统一错误文案.
        **options: 支持 context, extra, expected_exceptions, fallback_exception, log_event.

    Returns:
        业务函数的执行结果,通常是 Flask 的响应对象.

    Raises:
        AppError: 当业务逻辑主动抛出或 fallback_exception 包装时.

    """
    handled_exceptions = DEFAULT_EXPECTED_EXCEPTIONS
    expected_exceptions = options.get("expected_exceptions")
    if expected_exceptions:
        handled_exceptions += expected_exceptions

    fallback_exception = options.get("fallback_exception", SystemError)
    event = options.get("log_event") or f"{action}执行失败"
    context_payload: ContextDict = dict(cast("ContextMapping | None", options.get("context")) or {})
    extra_payload: dict[str, object] = dict(cast("LoggerExtra | None", options.get("extra")) or {})

    try:
        return func()
    except handled_exceptions as exc:
        db.session.rollback()
        log_with_context(
            "warning",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={**extra_payload, "error_type": exc.__class__.__name__, "error_message": str(exc)},
        )
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={**extra_payload, "error_type": exc.__class__.__name__, "database": True},
        )
        raise DatabaseError(public_error) from exc
    except Exception as exc:
        db.session.rollback()
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={**extra_payload, "error_type": exc.__class__.__name__, "unexpected": True},
        )
        raise fallback_exception(public_error) from exc
