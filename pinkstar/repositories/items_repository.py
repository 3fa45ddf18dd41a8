"""项目与分类读模型 Repository.

职责:
- 仅负责 Query 组装与数据库读取
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from pinkstar import db
from pinkstar.constants import ProjectStatus
from pinkstar.models.category import Category
from pinkstar.models.item import Item
from pinkstar.models.resource import Resource
from pinkstar.types.items import ItemRowProjection


class ItemsRepository:
    """项目/分类查询 Repository."""

    @staticmethod
    def get_item(item_type: str, slug: str) -> Item | None:
        return db.session.query(Item).filter(Item.item_type == item_type, Item.slug == slug).first()

    @staticmethod
    def get_category(item_id: int, category_slug: str) -> Category | None:
        return (
            db.session.query(Category)
            .filter(Category.parent_item_id == item_id, Category.slug == category_slug)
            .first()
        )

    @staticmethod
    def list_published_items(item_type: str) -> list[ItemRowProjection]:
        """列出某类型的已发布项目,附带已发布资源数量与下载总量."""
        stats = (
            db.session.query(
                Resource.parent_item_id.label("item_id"),
                db.func.count(Resource.id).label("resource_count"),
                db.func.coalesce(db.func.sum(Resource.downloads), 0).label("total_downloads"),
            )
            .filter(Resource.status == ProjectStatus.PUBLISHED)
            .group_by(Resource.parent_item_id)
            .subquery()
        )
        rows = (
            db.session.query(Item, stats.c.resource_count, stats.c.total_downloads)
            .outerjoin(stats, stats.c.item_id == Item.id)
            .filter(Item.item_type == item_type, Item.status == ProjectStatus.PUBLISHED)
            .order_by(Item.id.asc())
            .all()
        )
        return [
            ItemRowProjection(
                item=item,
                resource_count=int(resource_count or 0),
                total_downloads=int(total_downloads or 0),
            )
            for item, resource_count, total_downloads in rows
        ]
