"""Flask-RESTX Api 定制.

- `/api/v1/` 根路径返回入口索引(文档、OpenAPI、健康检查)
- RestX 捕获的异常统一输出错误封套
"""

from __future__ import annotations

from flask import Response, current_app, jsonify, request
from flask_restx import Api

from pinkstar.utils.response_utils import jsonify_unified_success, unified_error_response
from pinkstar.utils.structlog_config import ErrorContext


def _with_status(response: Response, status_code: int) -> Response:
    response.status_code = status_code
    return response


class PinkStarApi(Api):
    """PinkStar 资源查询 API."""

    def render_root(self) -> Response:  # type: ignore[override]
        prefix = request.path.rstrip("/")
        response, status_code = jsonify_unified_success(
            data={
                "name": current_app.config.get("APP_NAME"),
                "version": current_app.config.get("APP_VERSION"),
                "docs_url": f"{prefix}{self._doc}" if self._doc else None,
                "openapi_url": f"{prefix}/openapi.json",
                "health_ping_url": f"{prefix}/health/ping",
                "file_channels_url": f"{prefix}/file-channels",
            },
            message="API v1 已就绪",
        )
        return _with_status(response, status_code)

    def handle_error(self, e: Exception) -> Response:  # type: ignore[override]
        payload, status_code = unified_error_response(e, context=ErrorContext(e, request))
        return _with_status(jsonify(payload), status_code)
