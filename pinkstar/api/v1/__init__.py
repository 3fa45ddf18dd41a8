"""API v1 (Flask-RESTX).

该包仅承载对外 JSON API 的路由层与 OpenAPI 文档能力.
业务编排与数据访问复用 services/repositories.
"""

from __future__ import annotations

from typing import cast

from flask import Blueprint, Response, jsonify

from pinkstar.api.v1.api import PinkStarApi
from pinkstar.api.v1.namespaces.authors import ns as authors_ns
from pinkstar.api.v1.namespaces.file_channels import ns as file_channels_ns
from pinkstar.api.v1.namespaces.health import ns as health_ns
from pinkstar.api.v1.namespaces.items import ns as items_ns
from pinkstar.api.v1.namespaces.resources import ns as resources_ns
from pinkstar.settings import Settings


def create_api_v1_blueprint(settings: Settings) -> Blueprint:
    """创建并配置 `/api/v1` Blueprint.

    - Swagger UI: `/api/v1/docs`(可配置关闭)
    - OpenAPI JSON: `/api/v1/openapi.json`
    """
    blueprint = Blueprint("api_v1", __name__)

    docs_path = "/docs" if settings.api_v1_docs_enabled else cast(str, False)
    api = PinkStarApi(
        blueprint,
        title=settings.app_name,
        version=settings.app_version,
        doc=docs_path,
    )

    api.add_namespace(health_ns, path="/health")
    api.add_namespace(items_ns, path="/items")
    api.add_namespace(resources_ns, path="/items")
    api.add_namespace(authors_ns, path="/authors")
    api.add_namespace(file_channels_ns, path="/file-channels")

    @blueprint.get("/openapi.json")
    def openapi_json() -> tuple[Response, int]:
        return jsonify(api.__schema__), 200

    return blueprint
