"""Authors namespace: 作者已发布资源."""

from __future__ import annotations

from typing import cast

from flask import request
from flask_restx import Namespace, fields, marshal

from pinkstar.api.v1.models.envelope import get_error_envelope_model, make_success_envelope_model
from pinkstar.api.v1.models.resources import register_resource_models
from pinkstar.api.v1.resources.base import BaseResource
from pinkstar.api.v1.resources.query_parsers import add_multi_argument, add_text_argument, new_parser
from pinkstar.api.v1.restx_models.resources import RESOURCE_LIST_ITEM_FIELDS
from pinkstar.constants.system_constants import SuccessMessages
from pinkstar.schemas.resources_query import AuthorResourcesQuery
from pinkstar.schemas.validation import validate_or_raise
from pinkstar.services.resources.resource_list_service import ResourceListService

ns = Namespace("authors", description="作者资源")

ErrorEnvelope = get_error_envelope_model(ns)
ResourceListItemModel = register_resource_models(ns)

AuthorResourcesData = ns.model(
    "AuthorResourcesData",
    {
        "resources": fields.List(fields.Nested(ResourceListItemModel), description="资源列表"),
        "total": fields.Integer(description="返回数量", example=2),
    },
)

AuthorResourcesSuccessEnvelope = make_success_envelope_model(ns, "AuthorResourcesSuccessEnvelope", AuthorResourcesData)

_author_resources_query_parser = new_parser()
add_text_argument(_author_resources_query_parser, "sort", "排序字段(created_at/updated_at/downloads/rating)")
add_text_argument(_author_resources_query_parser, "order", "排序方向(asc/desc)")
add_text_argument(_author_resources_query_parser, "limit", "返回数量(可选)")
add_multi_argument(_author_resources_query_parser, "exclude", "排除的资源 ID(可重复或逗号分隔)")


@ns.route("/<string:author_id>/resources")
class AuthorResourcesResource(BaseResource):
    """作者已发布资源列表."""

    @ns.response(200, "OK", AuthorResourcesSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    @ns.expect(_author_resources_query_parser)
    def get(self, author_id: str):
        """获取作者跨项目的已发布资源."""
        query_snapshot = request.args.to_dict(flat=False)

        def _execute():
            parsed = cast("dict[str, object]", _author_resources_query_parser.parse_args())
            query = validate_or_raise(AuthorResourcesQuery, parsed)
            resources = ResourceListService().get_author_published_resources(
                author_id,
                limit=query.limit,
                sort_by=query.sort,
                order=query.order,
                exclude_ids=query.exclude,
            )
            return self.success(
                data={"resources": marshal(resources, RESOURCE_LIST_ITEM_FIELDS), "total": len(resources)},
                message=SuccessMessages.RESOURCES_LOADED,
            )

        return self.safe_call(
            _execute,
            module="authors",
            action="get_author_published_resources",
            public_error="获取作者资源失败",
            context={"author_id": author_id, "query_params": query_snapshot},
        )
