"""OpenAPI: 资源/标签文档 Models.

marshal 使用的 `*_FIELDS` 以 dict 嵌套; 文档需要具名 Model,这里按 namespace 注册.
"""

from __future__ import annotations

from flask_restx import Model, Namespace, fields

from pinkstar.api.v1.restx_models.resources import RESOURCE_FILE_FIELDS, RESOURCE_LIST_ITEM_FIELDS
from pinkstar.api.v1.restx_models.tags import DYNAMIC_TAG_GROUP_FIELDS, TAG_SUMMARY_FIELDS


def register_tag_models(ns: Namespace) -> tuple[Model, Model]:
    """注册 TagSummary 与 DynamicTagGroup 文档 Model."""
    tag_model = ns.model("TagSummary", TAG_SUMMARY_FIELDS)
    group_model = ns.model(
        "DynamicTagGroup",
        {
            **DYNAMIC_TAG_GROUP_FIELDS,
            "tags": fields.List(fields.Nested(tag_model), description="可选标签"),
        },
    )
    return tag_model, group_model


def register_resource_models(ns: Namespace) -> Model:
    """注册 ResourceListItem 文档 Model(含文件与标签)."""
    tag_model, _ = register_tag_models(ns)
    file_model = ns.model(
        "ResourceFileItem",
        {
            **RESOURCE_FILE_FIELDS,
            "channel": fields.Nested(tag_model, allow_null=True, description="发布通道标签"),
        },
    )
    return ns.model(
        "ResourceListItem",
        {
            **RESOURCE_LIST_ITEM_FIELDS,
            "tags": fields.List(fields.Nested(tag_model), description="资源级标签"),
            "files": fields.List(fields.Nested(file_model), description="文件列表"),
        },
    )
