"""
PinkStar - 资源模型
"""

from pinkstar import db
from pinkstar.constants import ProjectStatus
from pinkstar.utils.time_utils import time_utils


class Resource(db.Model):
    """分类下可下载的资源.

    Attributes:
        id: 资源主键.
        slug: URL 标识,全局唯一.
        name: 资源名称.
        description: 简介.
        parent_item_id: 所属项目.
        category_id: 所属分类.
        author_id: 作者资料 ID.
        status: 发布状态.
        downloads / followers / rating / review_count: 统计计数.
        created_at: 创建时间.
        updated_at: 更新时间.
    """

    __tablename__ = "resources"

    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(160), nullable=False, unique=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    parent_item_id = db.Column(db.Integer, db.ForeignKey("items.id"), nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False, index=True)
    author_id = db.Column(db.String(64), db.ForeignKey("profiles.id"), nullable=True, index=True)
    status = db.Column(db.String(20), nullable=False, default=ProjectStatus.PUBLISHED, index=True)
    downloads = db.Column(db.Integer, nullable=False, default=0)
    followers = db.Column(db.Integer, nullable=False, default=0)
    rating = db.Column(db.Float, nullable=True)
    review_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=time_utils.now)
    updated_at = db.Column(db.DateTime(timezone=True), default=time_utils.now, onupdate=time_utils.now)

    parent_item = db.relationship("Item")
    category = db.relationship("Category")
    author = db.relationship("Profile")
    tag_assignments = db.relationship(
        "ResourceTagAssignment",
        back_populates="resource",
        cascade="all, delete-orphan",
    )
    files = db.relationship(
        "ResourceFile",
        back_populates="resource",
        order_by="ResourceFile.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Resource {self.slug}>"


class ResourceTagAssignment(db.Model):
    """资源级标签分配,按标签组记录."""

    __tablename__ = "resource_tags"

    resource_id = db.Column(db.Integer, db.ForeignKey("resources.id"), primary_key=True)
    group_id = db.Column(db.String(64), db.ForeignKey("tag_groups.id"), primary_key=True)
    tag_id = db.Column(db.String(64), db.ForeignKey("tags.id"), primary_key=True)

    resource = db.relationship("Resource", back_populates="tag_assignments")
    tag = db.relationship("Tag")
