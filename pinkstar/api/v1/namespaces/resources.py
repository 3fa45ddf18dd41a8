"""Resources namespace: 分类资源列表、最佳匹配与热门资源."""

from __future__ import annotations

from typing import cast

from flask import current_app, request
from flask_restx import Namespace, fields, marshal

from pinkstar.api.v1.models.envelope import get_error_envelope_model, make_success_envelope_model
from pinkstar.api.v1.models.resources import register_resource_models
from pinkstar.api.v1.resources.base import BaseResource
from pinkstar.api.v1.resources.query_parsers import add_multi_argument, add_text_argument, new_parser
from pinkstar.api.v1.restx_models.resources import RESOURCE_LIST_ITEM_FIELDS
from pinkstar.constants.system_constants import SuccessMessages
from pinkstar.schemas.resources_query import BestMatchQuery, HighlightedQuery, ResourcesListQuery
from pinkstar.schemas.validation import validate_or_raise
from pinkstar.services.resources.resource_list_service import ResourceListService
from pinkstar.services.resources.resource_query_engine import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

ns = Namespace("resources", description="分类资源查询")

ErrorEnvelope = get_error_envelope_model(ns)
ResourceListItemModel = register_resource_models(ns)

ResourcesListData = ns.model(
    "ResourcesListData",
    {
        "resources": fields.List(fields.Nested(ResourceListItemModel), description="资源列表"),
        "total": fields.Integer(description="过滤后总数", example=15),
        "has_more": fields.Boolean(description="是否还有下一页", example=True),
        "page": fields.Integer(description="页码", example=1),
        "limit": fields.Integer(description="实际生效的分页大小", example=20),
    },
)

ResourcesListSuccessEnvelope = make_success_envelope_model(ns, "ResourcesListSuccessEnvelope", ResourcesListData)

ResourcesPickData = ns.model(
    "ResourcesPickData",
    {
        "resources": fields.List(fields.Nested(ResourceListItemModel), description="资源列表"),
    },
)

ResourcesPickSuccessEnvelope = make_success_envelope_model(ns, "ResourcesPickSuccessEnvelope", ResourcesPickData)

_resources_list_query_parser = new_parser()
add_multi_argument(_resources_list_query_parser, "tags", "所选标签 ID(可重复或逗号分隔, AND 语义)")
add_text_argument(_resources_list_query_parser, "search", "搜索关键字")
add_text_argument(_resources_list_query_parser, "sort", "排序模式(relevance/downloads/updated_at/created_at/created_at_asc/name)")
add_text_argument(_resources_list_query_parser, "page", "页码(从 1 开始)")
add_text_argument(_resources_list_query_parser, "limit", "分页大小")
add_text_argument(_resources_list_query_parser, "include_drafts", "是否包含草稿(需版主或管理员)")

_best_match_query_parser = new_parser()
add_text_argument(_best_match_query_parser, "search", "搜索关键字")
add_text_argument(_best_match_query_parser, "limit", "返回数量")

_highlighted_query_parser = new_parser()
add_text_argument(_highlighted_query_parser, "limit", "返回数量")

_CATEGORY_ROUTE = "/<string:item_type>/<string:item_slug>/categories/<string:category_slug>/resources"


def _build_service() -> ResourceListService:
    return ResourceListService(
        default_limit=int(current_app.config.get("RESOURCES_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_LIMIT)),
        max_limit=int(current_app.config.get("RESOURCES_MAX_PAGE_SIZE", MAX_PAGE_LIMIT)),
    )


def _scope_context(item_type: str, item_slug: str, category_slug: str) -> dict[str, object]:
    return {
        "item_type": item_type,
        "item_slug": item_slug,
        "category_slug": category_slug,
        "query_params": request.args.to_dict(flat=False),
    }


@ns.route(_CATEGORY_ROUTE)
class CategoryResourcesResource(BaseResource):
    """分类资源列表资源."""

    @ns.response(200, "OK", ResourcesListSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    @ns.expect(_resources_list_query_parser)
    def get(self, item_type: str, item_slug: str, category_slug: str):
        """按标签/搜索/排序分页查询分类资源."""
        caller = self.caller_context()

        def _execute():
            parsed = cast("dict[str, object]", _resources_list_query_parser.parse_args())
            query = validate_or_raise(ResourcesListQuery, parsed)
            service = _build_service()
            params = service.normalize_params(
                query.to_params(item_type=item_type, item_slug=item_slug, category_slug=category_slug),
            )
            result = service.get_resources(params, caller)
            return self.success(
                data={
                    "resources": marshal(result.resources, RESOURCE_LIST_ITEM_FIELDS),
                    "total": result.total,
                    "has_more": result.has_more,
                    "page": params.page,
                    "limit": params.limit,
                },
                message=SuccessMessages.RESOURCES_LOADED,
            )

        return self.safe_call(
            _execute,
            module="resources",
            action="list_category_resources",
            public_error="获取资源列表失败",
            context=_scope_context(item_type, item_slug, category_slug),
        )


@ns.route(f"{_CATEGORY_ROUTE}/best-match")
class BestMatchResourcesResource(BaseResource):
    """分类最佳匹配资源."""

    @ns.response(200, "OK", ResourcesPickSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    @ns.expect(_best_match_query_parser)
    def get(self, item_type: str, item_slug: str, category_slug: str):
        """按相关性返回与搜索词最匹配的少量资源."""
        caller = self.caller_context()

        def _execute():
            parsed = cast("dict[str, object]", _best_match_query_parser.parse_args())
            query = validate_or_raise(BestMatchQuery, parsed)
            resources = _build_service().get_best_match_for_category(
                item_slug,
                item_type,
                category_slug,
                query.search,
                caller,
                limit=query.limit,
            )
            return self.success(
                data={"resources": marshal(resources, RESOURCE_LIST_ITEM_FIELDS)},
                message=SuccessMessages.RESOURCES_LOADED,
            )

        return self.safe_call(
            _execute,
            module="resources",
            action="get_best_match_for_category",
            public_error="获取最佳匹配资源失败",
            context=_scope_context(item_type, item_slug, category_slug),
        )


@ns.route(f"{_CATEGORY_ROUTE}/highlighted")
class HighlightedResourcesResource(BaseResource):
    """分类热门资源."""

    @ns.response(200, "OK", ResourcesPickSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    @ns.expect(_highlighted_query_parser)
    def get(self, item_type: str, item_slug: str, category_slug: str):
        """返回分类内下载量最高的资源."""
        caller = self.caller_context()

        def _execute():
            parsed = cast("dict[str, object]", _highlighted_query_parser.parse_args())
            query = validate_or_raise(HighlightedQuery, parsed)
            resources = _build_service().get_highlighted_resources(
                item_slug,
                item_type,
                category_slug,
                caller,
                limit=query.limit,
            )
            return self.success(
                data={"resources": marshal(resources, RESOURCE_LIST_ITEM_FIELDS)},
                message=SuccessMessages.RESOURCES_LOADED,
            )

        return self.safe_call(
            _execute,
            module="resources",
            action="get_highlighted_resources",
            public_error="获取热门资源失败",
            context=_scope_context(item_type, item_slug, category_slug),
        )
