"""
PinkStar - 项目模型
"""

from pinkstar import db
from pinkstar.constants import ItemType, ProjectStatus
from pinkstar.utils.time_utils import time_utils


class Item(db.Model):
    """顶层项目模型(游戏/网页项目/应用/美术音乐).

    Attributes:
        id: 项目主键.
        slug: URL 标识,在同一类型内唯一.
        name: 项目名称.
        item_type: 项目类型,取值见 ItemType.
        description: 简介.
        status: 发布状态,取值见 ProjectStatus.
        followers_count: 关注数.
        created_at: 创建时间.
        updated_at: 更新时间.
    """

    __tablename__ = "items"
    __table_args__ = (db.UniqueConstraint("item_type", "slug", name="uq_items_type_slug"),)

    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(120), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    item_type = db.Column(db.String(20), nullable=False, default=ItemType.GAME, index=True)
    description = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default=ProjectStatus.PUBLISHED)
    followers_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=time_utils.now)
    updated_at = db.Column(db.DateTime(timezone=True), default=time_utils.now, onupdate=time_utils.now)

    categories = db.relationship(
        "Category",
        back_populates="parent_item",
        order_by="Category.sort_order",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Item {self.item_type}:{self.slug}>"
