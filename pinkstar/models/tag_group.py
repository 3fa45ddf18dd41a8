"""
PinkStar - 动态标签组模型
"""

from pinkstar import db


class TagGroup(db.Model):
    """分类下的可配置筛选维度(如 "Platform").

    Attributes:
        id: 标签组 ID.
        category_id: 所属分类.
        display_name: 展示名称.
        sort_order: 组排序.
        applies_to_resources: 是否作用于资源级标签.
        applies_to_files: 是否作用于文件级标签.
    """

    __tablename__ = "tag_groups"

    id = db.Column(db.String(64), primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False, index=True)
    display_name = db.Column(db.String(120), nullable=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    applies_to_resources = db.Column(db.Boolean, nullable=False, default=True)
    applies_to_files = db.Column(db.Boolean, nullable=False, default=False)

    category = db.relationship("Category", back_populates="tag_groups")
    memberships = db.relationship(
        "TagGroupMembership",
        back_populates="group",
        order_by="TagGroupMembership.sort_order",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<TagGroup {self.id}>"


class TagGroupMembership(db.Model):
    """标签组成员配置, (group_id, tag_id) 唯一."""

    __tablename__ = "tag_group_tags"

    group_id = db.Column(db.String(64), db.ForeignKey("tag_groups.id"), primary_key=True)
    tag_id = db.Column(db.String(64), db.ForeignKey("tags.id"), primary_key=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    group = db.relationship("TagGroup", back_populates="memberships")
    tag = db.relationship("Tag")
