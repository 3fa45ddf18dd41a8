"""OpenAPI: JSON Envelope Models.

仅用于文档表达; 实际响应以 `jsonify_unified_success` / 全局错误处理器为准.
"""

from __future__ import annotations

from flask_restx import Model, Namespace, fields

_TIMESTAMP_EXAMPLE = "2026-01-01T00:00:00+00:00"


def get_error_envelope_model(ns: Namespace) -> Model:
    """注册/获取错误封套 Model(每个 namespace 只注册一次)."""
    model_name = "ErrorEnvelope"
    if model_name in ns.models:
        return ns.models[model_name]

    return ns.model(
        model_name,
        {
            "success": fields.Boolean(required=True, description="是否成功", example=False),
            "error": fields.Boolean(required=True, description="是否错误", example=True),
            "error_id": fields.String(required=True, description="错误ID", example="9f2c1e0a"),
            "category": fields.String(required=True, description="错误分类", example="system"),
            "severity": fields.String(required=True, description="严重程度", example="high"),
            "message_code": fields.String(required=True, description="错误码", example="INTERNAL_ERROR"),
            "message": fields.String(required=True, description="可展示的错误摘要", example="获取资源列表失败"),
            "timestamp": fields.String(required=True, description="时间戳(ISO8601)", example=_TIMESTAMP_EXAMPLE),
            "recoverable": fields.Boolean(required=True, description="是否可恢复", example=True),
            "suggestions": fields.List(fields.String, required=True, description="建议列表", example=["请稍后重试"]),
            "context": fields.Raw(required=True, description="结构化上下文信息", example={}),
            "extra": fields.Raw(required=False, description="非敏感诊断字段(可选)", example={}),
        },
    )


def make_success_envelope_model(ns: Namespace, name: str, data_model: Model | None = None) -> Model:
    """构建成功封套 Model, data_model 为空时 data 以 Raw 表达."""
    data_field: fields.Raw
    if data_model is None:
        data_field = fields.Raw(required=False, description="响应数据(可选)", example={})
    else:
        data_field = fields.Nested(data_model, required=False, description="响应数据(可选)")

    return ns.model(
        name,
        {
            "success": fields.Boolean(required=True, description="是否成功", example=True),
            "error": fields.Boolean(required=True, description="是否错误", example=False),
            "message": fields.String(required=True, description="可展示的成功摘要", example="操作成功"),
            "timestamp": fields.String(required=True, description="时间戳(ISO8601)", example=_TIMESTAMP_EXAMPLE),
            "data": data_field,
            "meta": fields.Raw(required=False, description="元数据(可选)", example={}),
        },
    )
