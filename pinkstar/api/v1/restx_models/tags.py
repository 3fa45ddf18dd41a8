"""标签/筛选标签组序列化模型(Flask-RESTX marshal fields)."""

from flask_restx import fields

TAG_SUMMARY_FIELDS: dict[str, fields.Raw] = {
    "id": fields.String(description="标签 ID", example="v1-20"),
    "name": fields.String(description="标签名称", example="1.20"),
    "tag_type": fields.String(description="标签类型", example="version"),
    "color": fields.String(description="背景色(可选)", example="hsl(145 63% 42%)"),
    "text_color": fields.String(description="文字色(可选)"),
    "border_color": fields.String(description="边框色(可选)"),
    "hover_bg_color": fields.String(description="悬停背景色(可选)"),
    "hover_text_color": fields.String(description="悬停文字色(可选)"),
    "hover_border_color": fields.String(description="悬停边框色(可选)"),
    "icon_svg": fields.String(description="图标 SVG(可选)"),
}

DYNAMIC_TAG_GROUP_FIELDS: dict[str, fields.Raw] = {
    "id": fields.String(description="标签组 ID", example="mods-version"),
    "display_name": fields.String(description="展示名称", example="Version"),
    "category_id": fields.Integer(description="所属分类 ID", example=1),
    "tags": fields.List(fields.Nested(TAG_SUMMARY_FIELDS), description="可选标签"),
    "applies_to_resources": fields.Boolean(description="是否作用于资源", example=True),
    "applies_to_files": fields.Boolean(description="是否作用于文件", example=False),
}

FILE_CHANNEL_FIELDS: dict[str, fields.Raw] = {
    "id": fields.String(description="通道 ID", example="release"),
    "name": fields.String(description="通道名称", example="Release"),
    "description": fields.String(description="通道说明"),
    "color": fields.String(description="背景色"),
    "text_color": fields.String(description="文字色"),
    "border_color": fields.String(description="边框色"),
    "tag_id": fields.String(description="映射的标签 ID", example="channel-release"),
}
