"""
用户角色常量

定义用户角色及其查看权限,避免魔法字符串.
"""

from typing import ClassVar


class UserRole:
    """用户角色常量

    调用方上下文中的角色只决定可见性(如是否允许查看草稿资源).
    """

    # ============================================================================
    # 角色值
    # ============================================================================
    USUARIO = "usuario"         # 普通用户
    VIP = "vip"                 # 会员
    MOD = "mod"                 # 版主
    ADMIN = "admin"             # 管理员

    ALL: ClassVar[tuple[str, ...]] = (USUARIO, VIP, MOD, ADMIN)

    # ============================================================================
    # 权限定义
    # ============================================================================
    PERM_READ = "read"                  # 浏览已发布内容
    PERM_VIEW_DRAFTS = "view_drafts"    # 浏览草稿内容

    PERMISSIONS: ClassVar[dict[str, tuple[str, ...]]] = {
        USUARIO: (PERM_READ,),
        VIP: (PERM_READ,),
        MOD: (PERM_READ, PERM_VIEW_DRAFTS),
        ADMIN: (PERM_READ, PERM_VIEW_DRAFTS),
    }

    DISPLAY_NAMES: ClassVar[dict[str, str]] = {
        USUARIO: "用户",
        VIP: "会员",
        MOD: "版主",
        ADMIN: "管理员",
    }

    # ============================================================================
    # 辅助方法
    # ============================================================================

    @classmethod
    def is_valid(cls, role: str | None) -> bool:
        """验证角色是否有效

        Args:
            role: 角色字符串

        Returns:
            bool: 是否为有效角色

        """
        return role in cls.ALL

    @classmethod
    def has_permission(cls, role: str, permission: str) -> bool:
        """检查角色是否有指定权限

        Args:
            role: 角色字符串
            permission: 权限字符串

        Returns:
            bool: 是否有权限

        """
        return permission in cls.PERMISSIONS.get(role, ())

    @classmethod
    def can_view_drafts(cls, role: str) -> bool:
        """判断角色是否可以查看草稿."""
        return cls.has_permission(role, cls.PERM_VIEW_DRAFTS)

    @classmethod
    def get_display_name(cls, role: str) -> str:
        """获取角色的显示名称."""
        return cls.DISPLAY_NAMES.get(role, role)
