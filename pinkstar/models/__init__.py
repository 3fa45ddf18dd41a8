"""PinkStar 数据模型."""
