"""资源列表序列化模型(Flask-RESTX marshal fields)."""

from flask_restx import fields

from pinkstar.api.v1.restx_models.tags import TAG_SUMMARY_FIELDS

RESOURCE_FILE_FIELDS: dict[str, fields.Raw] = {
    "id": fields.Integer(description="文件 ID", example=1),
    "name": fields.String(description="文件名", example="dark-mode-1.2.0.zip"),
    "version_name": fields.String(description="版本号", example="1.2.0"),
    "channel": fields.Nested(TAG_SUMMARY_FIELDS, allow_null=True, description="发布通道标签"),
    "changelog": fields.String(description="更新日志"),
    "downloads": fields.Integer(description="下载量", example=120),
    "created_at": fields.DateTime(dt_format="iso8601", description="创建时间(ISO8601)"),
    "updated_at": fields.DateTime(dt_format="iso8601", description="更新时间(ISO8601)"),
    "tag_ids": fields.List(fields.String, description="文件标签 ID 列表"),
}

RESOURCE_LIST_ITEM_FIELDS: dict[str, fields.Raw] = {
    "id": fields.Integer(description="资源 ID", example=1),
    "slug": fields.String(description="资源 slug", example="dark-mode-theme"),
    "name": fields.String(description="资源名称", example="Dark Mode Theme"),
    "description": fields.String(description="简介"),
    "item_slug": fields.String(description="所属项目 slug", example="minecraft"),
    "item_type": fields.String(description="所属项目类型", example="game"),
    "category_slug": fields.String(description="所属分类 slug", example="mods"),
    "status": fields.String(description="发布状态", example="published"),
    "author_id": fields.String(description="作者 ID"),
    "author_name": fields.String(description="作者名称", example="Pink"),
    "downloads": fields.Integer(description="下载量", example=1200),
    "followers": fields.Integer(description="关注数", example=30),
    "rating": fields.Float(description="评分(可选)", example=4.5),
    "review_count": fields.Integer(description="评价数", example=12),
    "created_at": fields.DateTime(dt_format="iso8601", description="创建时间(ISO8601)"),
    "updated_at": fields.DateTime(dt_format="iso8601", description="更新时间(ISO8601)"),
    "tags": fields.List(fields.Nested(TAG_SUMMARY_FIELDS), description="资源级标签"),
    "tag_ids": fields.List(
        fields.String,
        attribute=lambda resource: sorted(resource.tag_ids),
        description="资源及其文件携带的标签 ID",
    ),
    "files": fields.List(fields.Nested(RESOURCE_FILE_FIELDS), description="文件列表"),
}
