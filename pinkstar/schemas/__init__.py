"""Query 参数 schema(pydantic)."""
