"""资源读模型 Repository.

职责:
- 仅负责 Query 组装与数据库读取(范围与状态过滤下推到数据库)
- 标签 AND 过滤、搜索打分、排序与分页由查询引擎在内存中完成
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import selectinload

from pinkstar import db
from pinkstar.constants import AuthorResourceSort, ProjectStatus
from pinkstar.models.resource import Resource, ResourceTagAssignment
from pinkstar.models.resource_file import ResourceFile, ResourceFileTagAssignment
from pinkstar.types.resources import AuthorResourcesFilters

_AUTHOR_SORT_COLUMNS = {
    AuthorResourceSort.CREATED_AT: Resource.created_at,
    AuthorResourceSort.UPDATED_AT: Resource.updated_at,
    AuthorResourceSort.DOWNLOADS: Resource.downloads,
    AuthorResourceSort.RATING: Resource.rating,
}


class ResourcesRepository:
    """资源查询 Repository."""

    @staticmethod
    def _base_query():
        return db.session.query(Resource).options(
            selectinload(Resource.parent_item),
            selectinload(Resource.category),
            selectinload(Resource.author),
            selectinload(Resource.tag_assignments).selectinload(ResourceTagAssignment.tag),
            selectinload(Resource.files)
            .selectinload(ResourceFile.tag_assignments)
            .selectinload(ResourceFileTagAssignment.tag),
        )

    def list_scoped_candidates(
        self,
        *,
        item_id: int,
        category_id: int | None,
        statuses: Sequence[str],
    ) -> list[Resource]:
        """按父项目/分类与可见状态读取候选资源,按 id 升序返回."""
        query = self._base_query().filter(
            Resource.parent_item_id == item_id,
            Resource.status.in_(tuple(statuses)),
        )
        if category_id is not None:
            query = query.filter(Resource.category_id == category_id)
        return query.order_by(Resource.id.asc()).all()

    def list_author_published(self, filters: AuthorResourcesFilters) -> list[Resource]:
        """读取作者已发布资源."""
        sort_column = _AUTHOR_SORT_COLUMNS.get(filters.sort_by, Resource.created_at)
        sort_expr = sort_column.asc() if filters.order == "asc" else sort_column.desc()

        query = self._base_query().filter(
            Resource.author_id == filters.author_id,
            Resource.status == ProjectStatus.PUBLISHED,
        )
        if filters.exclude_ids:
            query = query.filter(Resource.id.notin_(filters.exclude_ids))

        query = query.order_by(sort_expr, Resource.id.asc())
        if filters.limit is not None:
            query = query.limit(filters.limit)
        return query.all()
