"""动态标签组读模型 Repository.

职责:
- 读取分类下的标签组,以及各组在范围内实际被使用的成员标签
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from pinkstar import db
from pinkstar.models.resource import Resource, ResourceTagAssignment
from pinkstar.models.resource_file import ResourceFile, ResourceFileTagAssignment
from pinkstar.models.tag import Tag
from pinkstar.models.tag_group import TagGroup, TagGroupMembership
from pinkstar.types.tags import TagGroupRowProjection


class TagGroupsRepository:
    """标签组查询 Repository."""

    @staticmethod
    def list_groups(category_id: int) -> list[TagGroup]:
        return (
            db.session.query(TagGroup)
            .filter(TagGroup.category_id == category_id)
            .order_by(TagGroup.sort_order.asc(), TagGroup.id.asc())
            .all()
        )

    @staticmethod
    def list_in_use_member_tags(category_id: int, statuses: Sequence[str]) -> list[TagGroupRowProjection]:
        """读取分类内各标签组被可见资源或其文件实际使用的成员标签.

        资源级使用仅对 `applies_to_resources` 的组生效,
        文件级使用仅对 `applies_to_files` 的组生效.
        结果按 (组排序, 组 id, 成员排序, 标签名) 排列.
        """
        visible_statuses = tuple(statuses)
        # 按 (group_id, tag_id) 关联: 同一标签挂在别的组下不算本组在用
        resource_usage = (
            select(ResourceTagAssignment.resource_id)
            .join(Resource, Resource.id == ResourceTagAssignment.resource_id)
            .where(
                ResourceTagAssignment.group_id == TagGroupMembership.group_id,
                ResourceTagAssignment.tag_id == TagGroupMembership.tag_id,
                Resource.category_id == category_id,
                Resource.status.in_(visible_statuses),
            )
            .exists()
        )
        file_usage = (
            select(ResourceFileTagAssignment.file_id)
            .join(ResourceFile, ResourceFile.id == ResourceFileTagAssignment.file_id)
            .join(Resource, Resource.id == ResourceFile.resource_id)
            .where(
                ResourceFileTagAssignment.group_id == TagGroupMembership.group_id,
                ResourceFileTagAssignment.tag_id == TagGroupMembership.tag_id,
                Resource.category_id == category_id,
                Resource.status.in_(visible_statuses),
            )
            .exists()
        )

        rows = (
            db.session.query(TagGroupMembership.group_id, Tag, TagGroupMembership.sort_order)
            .join(Tag, Tag.id == TagGroupMembership.tag_id)
            .join(TagGroup, TagGroup.id == TagGroupMembership.group_id)
            .filter(TagGroup.category_id == category_id)
            .filter(
                db.or_(
                    db.and_(TagGroup.applies_to_resources.is_(True), resource_usage),
                    db.and_(TagGroup.applies_to_files.is_(True), file_usage),
                ),
            )
            .order_by(
                TagGroup.sort_order.asc(),
                TagGroup.id.asc(),
                TagGroupMembership.sort_order.asc(),
                Tag.name.asc(),
            )
            .all()
        )
        return [
            TagGroupRowProjection(group_id=group_id, tag=tag, member_sort_order=int(sort_order or 0))
            for group_id, tag, sort_order in rows
        ]
