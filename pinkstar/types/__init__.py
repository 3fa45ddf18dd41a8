"""PinkStar 类型定义(dataclass / Protocol / 类型别名)."""
