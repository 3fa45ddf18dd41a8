"""项目列表序列化模型(Flask-RESTX marshal fields)."""

from flask_restx import fields

ITEM_STATS_FIELDS: dict[str, fields.Raw] = {
    "resource_count": fields.Integer(description="已发布资源数", example=42),
    "total_downloads": fields.Integer(description="资源下载总量", example=10500),
    "followers": fields.Integer(description="关注数", example=300),
}

ITEM_LIST_ITEM_FIELDS: dict[str, fields.Raw] = {
    "id": fields.Integer(description="项目 ID", example=1),
    "slug": fields.String(description="项目 slug", example="minecraft"),
    "name": fields.String(description="项目名称", example="Minecraft"),
    "item_type": fields.String(description="项目类型", example="game"),
    "description": fields.String(description="简介"),
    "created_at": fields.DateTime(dt_format="iso8601", description="创建时间(ISO8601)"),
    "updated_at": fields.DateTime(dt_format="iso8601", description="更新时间(ISO8601)"),
    "stats": fields.Nested(ITEM_STATS_FIELDS, description="统计信息"),
}
