"""Health namespace."""

from __future__ import annotations

from flask_restx import Namespace, fields
from sqlalchemy.exc import SQLAlchemyError

from pinkstar.api.v1.models.envelope import get_error_envelope_model, make_success_envelope_model
from pinkstar.api.v1.resources.base import BaseResource
from pinkstar.repositories.health_repository import HealthRepository
from pinkstar.settings import APP_VERSION
from pinkstar.utils.structlog_config import log_warning
from pinkstar.utils.time_utils import time_utils

ns = Namespace("health", description="健康检查")

DATABASE_HEALTH_EXCEPTIONS: tuple[type[BaseException], ...] = (SQLAlchemyError,)

PingData = ns.model(
    "HealthPingData",
    {
        "status": fields.String(required=True, description="服务状态", example="ok"),
    },
)

PingSuccessEnvelope = make_success_envelope_model(ns, "HealthPingSuccessEnvelope", PingData)
ErrorEnvelope = get_error_envelope_model(ns)

HealthData = ns.model(
    "HealthCheckData",
    {
        "status": fields.String(required=True, description="整体状态", example="healthy"),
        "database": fields.String(required=True, description="数据库状态", example="connected"),
        "version": fields.String(required=True, description="版本号", example=APP_VERSION),
        "timestamp": fields.String(required=True, description="时间戳(ISO8601)"),
    },
)

HealthSuccessEnvelope = make_success_envelope_model(ns, "HealthCheckSuccessEnvelope", HealthData)


@ns.route("/ping")
class HealthPingResource(BaseResource):
    @ns.response(200, "OK", PingSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self):
        return self.success({"status": "ok"}, message="健康检查成功")


@ns.route("/check")
class HealthCheckResource(BaseResource):
    @ns.response(200, "OK", HealthSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self):
        def _execute():
            db_status = "connected"
            try:
                HealthRepository.ping_database()
            except DATABASE_HEALTH_EXCEPTIONS as exc:
                log_warning("数据库健康检查失败", module="health", exception=exc)
                db_status = "error"

            return self.success(
                data={
                    "status": "healthy" if db_status == "connected" else "degraded",
                    "database": db_status,
                    "version": APP_VERSION,
                    "timestamp": time_utils.now().isoformat(),
                },
                message="服务运行正常" if db_status == "connected" else "服务部分降级",
            )

        return self.safe_call(
            _execute,
            module="health",
            action="health_check",
            public_error="健康检查失败",
        )
