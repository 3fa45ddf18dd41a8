"""Schema 基础设施."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class PayloadSchema(BaseModel):
    """宽松 schema 基类.

    约定:
    - 默认忽略未知字段, 以兼容前端遗留的 query string.
    - 非法取值在字段 validator 中归一化为默认值,而不是拒绝请求.
    """

    model_config = ConfigDict(extra="ignore")


class QuerySchema(PayloadSchema):
    """读路径 query 参数的基础 schema.

    约定:
    - 禁止直接传入 offset(统一通过 page/limit 计算),避免绕过分页策略
    """

    @model_validator(mode="before")
    @classmethod
    def _reject_offset(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "offset" not in data:
            return data

        # reqparse 会把未传入的参数也放进 dict(值为 None),这里把空 offset 当作不存在
        offset_value = data.get("offset")
        if offset_value is None or (isinstance(offset_value, str) and not offset_value.strip()):
            mutable = dict(data)
            mutable.pop("offset", None)
            return mutable

        raise ValueError("不支持 offset")
