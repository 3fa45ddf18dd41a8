"""PinkStar - Flask 应用初始化.

基于Flask的内容市场资源查询服务(项目/分类/资源的动态标签筛选与检索).
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from pinkstar.constants import HttpHeaders
from pinkstar.settings import Settings
from pinkstar.utils.response_utils import unified_error_response
from pinkstar.utils.structlog_config import ErrorContext, configure_structlog

# 初始化扩展
db = SQLAlchemy()
cors = CORS()


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 初始化扩展
    initialize_extensions(app, resolved_settings)

    # 注册蓝图
    configure_blueprints(app, resolved_settings)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)

    from pinkstar.utils.logging.request_middleware import register_request_logging  # noqa: PLC0415

    register_request_logging(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        payload, status_code = unified_error_response(error, context=ErrorContext(error, request))
        return jsonify(payload), status_code

    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,包含环境变量解析、默认值与校验结果.

    """
    app.config.from_mapping(settings.to_flask_config())
    app.config.setdefault("APPLICATION_ROOT", "/")
    app.extensions["pinkstar_settings"] = settings


def initialize_extensions(app: Flask, settings: Settings) -> None:
    """初始化数据库与 CORS 扩展.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,用于扩展初始化参数注入.

    """
    db.init_app(app)

    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": list(settings.cors_origins),
                "methods": ["GET", "OPTIONS"],
                "allow_headers": [
                    HttpHeaders.CONTENT_TYPE,
                    HttpHeaders.AUTHORIZATION,
                    HttpHeaders.X_REQUEST_ID,
                    HttpHeaders.X_USER_ID,
                    HttpHeaders.X_USER_ROLE,
                ],
                "expose_headers": [HttpHeaders.X_REQUEST_ID],
            },
        },
    )


def configure_blueprints(app: Flask, settings: Settings) -> None:
    """注册 API 蓝图以暴露路由."""
    from pinkstar.api import register_api_blueprints  # noqa: PLC0415

    register_api_blueprints(app, settings)


def configure_logging(app: Flask) -> None:
    """配置日志系统与文件处理器.

    调试与测试环境只输出到控制台.
    """
    if app.debug or app.testing:
        return

    log_path = Path(app.config["LOG_FILE"])
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=app.config["LOG_MAX_SIZE"],
        backupCount=app.config["LOG_BACKUP_COUNT"],
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
    )
    file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
    logging.getLogger().addHandler(file_handler)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
    app.logger.info("PinkStar 应用启动")


from pinkstar.models import (  # noqa: F401, E402
    category,
    item,
    profile,
    resource,
    resource_file,
    tag,
    tag_group,
)
