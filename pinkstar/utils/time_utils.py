"""统一时间处理工具模块.

持久化层统一存储 UTC 时间;SQLite 读回的时间不带时区,这里统一补齐为 UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

# 缺失时间戳在排序中视为最早
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def to_utc(dt: str | date | datetime | None) -> datetime | None:
        """将时间转换为 UTC 时区.

        Args:
            dt: 待转换的时间,可以是字符串、date 或 datetime 对象.

        Returns:
            转换后的 UTC 时区时间,转换失败时返回 None.

        """
        if not dt:
            return None

        try:
            if isinstance(dt, str):
                if dt.endswith("Z"):
                    dt = dt[:-1] + "+00:00"
                dt = datetime.fromisoformat(dt)
            elif isinstance(dt, date) and not isinstance(dt, datetime):
                dt = datetime.combine(dt, datetime.min.time())

            if dt.tzinfo is None:
                # 无时区信息的时间按 UTC 存储约定处理
                dt = dt.replace(tzinfo=UTC)

            return dt.astimezone(UTC)
        except (ValueError, TypeError):
            return None

    def sort_key(self, dt: str | date | datetime | None) -> datetime:
        """返回可比较的排序键,缺失或非法时间视为 EPOCH."""
        return self.to_utc(dt) or EPOCH

    @staticmethod
    def to_json_serializable(dt: str | date | datetime | None) -> str | None:
        """转换时间对象为 JSON 可序列化的 ISO 字符串.

        Args:
            dt: 字符串、date 或 datetime 实例.

        Returns:
            ISO 格式字符串;若无法转换则返回 None.

        """
        if not dt:
            return None
        if isinstance(dt, str):
            return dt
        return dt.isoformat()


time_utils = TimeUtils()
