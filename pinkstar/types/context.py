"""调用方上下文类型.

查询不再读取全局登录态,而是显式接收调用方上下文.
"""

from __future__ import annotations

from dataclasses import dataclass

from pinkstar.constants import UserRole


@dataclass(frozen=True, slots=True)
class CallerContext:
    """单次查询的调用方身份.

    Attributes:
        user_id: 调用方用户 ID,匿名时为 None.
        role: 调用方角色,取值见 UserRole.

    """

    user_id: str | None = None
    role: str = UserRole.USUARIO

    @classmethod
    def anonymous(cls) -> CallerContext:
        return cls()

    @classmethod
    def from_raw(cls, user_id: str | None, role: str | None) -> CallerContext:
        """从原始字符串构造上下文,非法角色按匿名用户处理."""
        cleaned_user_id = (user_id or "").strip() or None
        cleaned_role = (role or "").strip().lower()
        if not UserRole.is_valid(cleaned_role):
            cleaned_role = UserRole.USUARIO
        return cls(user_id=cleaned_user_id, role=cleaned_role)

    @property
    def can_view_drafts(self) -> bool:
        return UserRole.can_view_drafts(self.role)
