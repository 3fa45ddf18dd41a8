"""Items namespace: 项目列表与分类筛选标签."""

from __future__ import annotations

from typing import cast

from flask import request
from flask_restx import Namespace, fields, marshal

from pinkstar.api.v1.models.envelope import get_error_envelope_model, make_success_envelope_model
from pinkstar.api.v1.models.resources import register_tag_models
from pinkstar.api.v1.resources.base import BaseResource
from pinkstar.api.v1.resources.query_parsers import add_text_argument, new_parser
from pinkstar.api.v1.restx_models.items import ITEM_LIST_ITEM_FIELDS, ITEM_STATS_FIELDS
from pinkstar.api.v1.restx_models.tags import DYNAMIC_TAG_GROUP_FIELDS
from pinkstar.constants.system_constants import SuccessMessages
from pinkstar.schemas.items_query import ItemsListQuery
from pinkstar.schemas.validation import validate_or_raise
from pinkstar.services.items.item_list_service import ItemListService
from pinkstar.services.tags.filter_tags_service import FilterTagsService

ns = Namespace("items", description="项目与分类筛选")

ErrorEnvelope = get_error_envelope_model(ns)
_, DynamicTagGroupModel = register_tag_models(ns)

ItemStatsModel = ns.model("ItemStats", ITEM_STATS_FIELDS)
ItemListItemModel = ns.model(
    "ItemListItem",
    {
        **ITEM_LIST_ITEM_FIELDS,
        "stats": fields.Nested(ItemStatsModel, description="统计信息"),
    },
)

ItemsListData = ns.model(
    "ItemsListData",
    {
        "items": fields.List(fields.Nested(ItemListItemModel), description="项目列表"),
        "total": fields.Integer(description="总数", example=3),
    },
)

ItemsListSuccessEnvelope = make_success_envelope_model(ns, "ItemsListSuccessEnvelope", ItemsListData)

FilterTagsData = ns.model(
    "FilterTagsData",
    {
        "groups": fields.List(fields.Nested(DynamicTagGroupModel), description="可用筛选标签组"),
    },
)

FilterTagsSuccessEnvelope = make_success_envelope_model(ns, "FilterTagsSuccessEnvelope", FilterTagsData)

_items_list_query_parser = new_parser()
add_text_argument(_items_list_query_parser, "item_type", "项目类型(game/web/app/art-music)")
add_text_argument(_items_list_query_parser, "search", "搜索关键字")
add_text_argument(_items_list_query_parser, "sort", "排序方式")


@ns.route("")
class ItemsResource(BaseResource):
    """项目列表资源."""

    @ns.response(200, "OK", ItemsListSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    @ns.expect(_items_list_query_parser)
    def get(self):
        """获取某类型的已发布项目列表."""
        query_snapshot = request.args.to_dict(flat=False)

        def _execute():
            parsed = cast("dict[str, object]", _items_list_query_parser.parse_args())
            filters = validate_or_raise(ItemsListQuery, parsed).to_filters()
            items = ItemListService().list_items(filters)
            return self.success(
                data={"items": marshal(items, ITEM_LIST_ITEM_FIELDS), "total": len(items)},
                message=SuccessMessages.ITEMS_LOADED,
            )

        return self.safe_call(
            _execute,
            module="items",
            action="list_items",
            public_error="获取项目列表失败",
            context={"query_params": query_snapshot},
        )


@ns.route("/<string:item_type>/<string:item_slug>/categories/<string:category_slug>/filter-tags")
class FilterTagsResource(BaseResource):
    """分类可用筛选标签资源."""

    @ns.response(200, "OK", FilterTagsSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self, item_type: str, item_slug: str, category_slug: str):
        """获取分类下的动态筛选标签组."""
        caller = self.caller_context()

        def _execute():
            groups = FilterTagsService().get_available_filter_tags(item_slug, item_type, category_slug, caller)
            return self.success(
                data={"groups": marshal(groups, DYNAMIC_TAG_GROUP_FIELDS)},
                message=SuccessMessages.FILTER_TAGS_LOADED,
            )

        return self.safe_call(
            _execute,
            module="tags",
            action="get_available_filter_tags",
            public_error="获取筛选标签失败",
            context={"item_type": item_type, "item_slug": item_slug, "category_slug": category_slug},
        )
