"""PinkStar - 常量定义模块

统一管理错误分类、严重度与响应文案.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    NETWORK = "network"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    PERMISSION_DENIED = "权限不足"
    RESOURCE_NOT_FOUND = "资源不存在"
    INVALID_REQUEST = "无效的请求"

    # 数据库错误
    DATABASE_QUERY_ERROR = "数据库查询错误"
    DATABASE_TIMEOUT = "数据库操作超时"

    # 业务错误
    ITEM_NOT_FOUND = "项目不存在"
    CATEGORY_NOT_FOUND = "分类不存在"
    AUTHOR_NOT_FOUND = "作者不存在"


# 成功消息常量
class SuccessMessages:
    """成功消息常量."""

    OPERATION_SUCCESS = "操作成功"
    RESOURCES_LOADED = "资源列表获取成功"
    FILTER_TAGS_LOADED = "筛选标签获取成功"
    ITEMS_LOADED = "项目列表获取成功"


__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "SuccessMessages",
]
