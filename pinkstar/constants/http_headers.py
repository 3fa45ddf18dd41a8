"""HTTP头常量.

定义项目使用到的HTTP头名称,避免魔法字符串.
"""


class HttpHeaders:
    """HTTP头常量."""

    CONTENT_TYPE = "Content-Type"
    AUTHORIZATION = "Authorization"

    # 请求追踪
    X_REQUEST_ID = "X-Request-ID"

    # 调用方上下文(认证体系之外的显式声明)
    X_USER_ID = "X-User-Id"
    X_USER_ROLE = "X-User-Role"
