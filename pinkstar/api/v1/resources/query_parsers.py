"""API v1 query 参数解析工具.

约束:
- 仅用于 API 层的 query params(`request.args`)
- 通过 `flask_restx.reqparse.RequestParser` 统一解析并配合 `@ns.expect(parser)`
- 统一以字符串接收,类型转换与归一化交给 pinkstar.schemas
"""

from __future__ import annotations

from typing import Final

from flask_restx import reqparse

_DEFAULT_BUNDLE_ERRORS: Final[bool] = True


def new_parser(*, bundle_errors: bool = _DEFAULT_BUNDLE_ERRORS) -> reqparse.RequestParser:
    """构造统一配置的 RequestParser."""
    return reqparse.RequestParser(bundle_errors=bundle_errors)


def add_text_argument(parser: reqparse.RequestParser, name: str, help_text: str) -> None:
    """注册一个字符串 query 参数."""
    parser.add_argument(name, type=str, location="args", required=False, help=help_text)


def add_multi_argument(parser: reqparse.RequestParser, name: str, help_text: str) -> None:
    """注册一个可重复的 query 参数(`?tags=a&tags=b` 或 `?tags=a,b`)."""
    parser.add_argument(name, type=str, action="append", location="args", required=False, help=help_text)
