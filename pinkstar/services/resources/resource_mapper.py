"""资源 ORM -> DTO 转换."""

from __future__ import annotations

from pinkstar.models.resource import Resource
from pinkstar.models.resource_file import ResourceFile
from pinkstar.services.files.file_channel_service import map_file_channel_to_tag
from pinkstar.types.resources import ResourceFileItem, ResourceListItem
from pinkstar.types.tags import TagSummary
from pinkstar.utils.time_utils import time_utils


def build_resource_file_item(resource_file: ResourceFile) -> ResourceFileItem:
    tag_ids = sorted({assignment.tag_id for assignment in resource_file.tag_assignments})
    return ResourceFileItem(
        id=resource_file.id,
        name=resource_file.name,
        version_name=resource_file.version_name,
        channel=map_file_channel_to_tag(resource_file.channel_id),
        changelog=resource_file.changelog,
        downloads=int(resource_file.downloads or 0),
        created_at=time_utils.to_utc(resource_file.created_at),
        updated_at=time_utils.to_utc(resource_file.updated_at),
        tag_ids=tag_ids,
    )


def build_resource_list_item(resource: Resource) -> ResourceListItem:
    """将资源模型转换为列表 DTO.

    资源级标签去重后按名称排序; `tag_ids` 合并资源自身与所有文件的标签.
    """
    tags_by_id: dict[str, TagSummary] = {}
    for assignment in resource.tag_assignments:
        if assignment.tag is not None and assignment.tag_id not in tags_by_id:
            tags_by_id[assignment.tag_id] = TagSummary.from_model(assignment.tag)

    files = [build_resource_file_item(resource_file) for resource_file in resource.files]
    carried = set(tags_by_id)
    for file_item in files:
        carried.update(file_item.tag_ids)

    item = resource.parent_item
    category = resource.category
    author = resource.author
    return ResourceListItem(
        id=resource.id,
        slug=resource.slug,
        name=resource.name,
        description=resource.description,
        item_slug=item.slug if item else "",
        item_type=item.item_type if item else "",
        category_slug=category.slug if category else "",
        status=resource.status,
        author_id=resource.author_id,
        author_name=author.name if author else None,
        downloads=int(resource.downloads or 0),
        followers=int(resource.followers or 0),
        rating=resource.rating,
        review_count=int(resource.review_count or 0),
        created_at=time_utils.to_utc(resource.created_at),
        updated_at=time_utils.to_utc(resource.updated_at),
        tags=sorted(tags_by_id.values(), key=lambda tag: (tag.name.casefold(), tag.id)),
        tag_ids=frozenset(carried),
        files=files,
    )
