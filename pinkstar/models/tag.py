"""
PinkStar - 标签模型
"""

from pinkstar import db
from pinkstar.constants import TagType


class Tag(db.Model):
    """标签模型.

    标签被资源引用后视为不可变; 标签的增删改属于管理后台,不在查询核心内.

    Attributes:
        id: 标签 ID(字符串, 如 "v1-20").
        name: 显示名称.
        tag_type: 语义类型,取值见 TagType.
        color / text_color / border_color: 可选的展示颜色.
        hover_bg_color / hover_text_color / hover_border_color: 可选的悬停颜色.
        icon_svg: 可选图标 SVG 片段.
    """

    __tablename__ = "tags"

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    tag_type = db.Column(db.String(20), nullable=False, default=TagType.MISC)
    color = db.Column(db.String(40), nullable=True)
    text_color = db.Column(db.String(40), nullable=True)
    border_color = db.Column(db.String(40), nullable=True)
    hover_bg_color = db.Column(db.String(40), nullable=True)
    hover_text_color = db.Column(db.String(40), nullable=True)
    hover_border_color = db.Column(db.String(40), nullable=True)
    icon_svg = db.Column(db.Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Tag {self.id}>"
