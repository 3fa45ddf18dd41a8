"""常量模块.

集中管理 PinkStar 的系统常量,包括项目类型、状态、标签类型、排序模式、用户角色等.

主要常量:
- ItemType: 项目类型常量
- ProjectStatus: 项目/资源状态常量
- TagType: 标签语义类型常量
- ResourceSortMode / ItemSortOption: 排序模式常量
- UserRole: 用户角色常量
- FileChannel / FILE_CHANNELS: 文件发布通道
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
"""

# 导入HTTP状态码常量(使用Python标准库)
from http import HTTPStatus as HttpStatus

from .file_channels import FILE_CHANNELS, FileChannel
from .http_headers import HttpHeaders
from .item_types import ItemType
from .sort_modes import AuthorResourceSort, ItemSortOption, ResourceSortMode
from .status_types import ProjectStatus
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    SuccessMessages,
)
from .tag_types import TagType
from .user_roles import UserRole

__all__ = [
    "FILE_CHANNELS",
    "AuthorResourceSort",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FileChannel",
    "HttpHeaders",
    "HttpStatus",
    "ItemSortOption",
    "ItemType",
    "LogLevel",
    "ProjectStatus",
    "ResourceSortMode",
    "SuccessMessages",
    "TagType",
    "UserRole",
]
