"""健康检查 Repository.

职责:
- 仅负责数据库连通性探测
- 不 commit、不返回 Response
"""

from __future__ import annotations

from sqlalchemy import text

from pinkstar import db


class HealthRepository:
    """健康检查数据访问."""

    @staticmethod
    def ping_database() -> None:
        db.session.execute(text("SELECT 1"))
