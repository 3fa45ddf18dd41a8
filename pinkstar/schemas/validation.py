"""Query schema 校验入口.

query 参数的非法取值在字段 validator 中已归一化为默认值;
能走到这里失败的只有结构性错误(如传入 offset),统一转换为 400.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from pinkstar.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_FALLBACK_MESSAGE = "参数校验失败"


def validate_or_raise(model: type[ModelT], payload: object) -> ModelT:
    """校验 payload(通常是 reqparse 的解析结果),失败时抛出项目的 ValidationError."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        message, field = _first_error(exc)
        extra = {"schema": model.__name__}
        if field:
            extra["field"] = field
        raise ValidationError(message, extra=extra) from None


def _first_error(exc: PydanticValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return _FALLBACK_MESSAGE, None

    first = errors[0]
    loc = first.get("loc") or ()
    field = loc[0] if loc and isinstance(loc[0], str) else None

    # model_validator 抛出的 ValueError 会被 pydantic 包一层 "Value error, ..."
    raw_error = (first.get("ctx") or {}).get("error")
    if isinstance(raw_error, ValueError):
        return str(raw_error), field

    msg = first.get("msg")
    return (msg if isinstance(msg, str) and msg.strip() else _FALLBACK_MESSAGE), field
