"""
PinkStar - 分类模型
"""

from pinkstar import db


class Category(db.Model):
    """项目下的资源分类(如 Mods、Maps).

    分类是动态标签组的归属单位: 每个标签组属于且仅属于一个分类.
    """

    __tablename__ = "categories"
    __table_args__ = (db.UniqueConstraint("parent_item_id", "slug", name="uq_categories_item_slug"),)

    id = db.Column(db.Integer, primary_key=True)
    parent_item_id = db.Column(db.Integer, db.ForeignKey("items.id"), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    slug = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    parent_item = db.relationship("Item", back_populates="categories")
    tag_groups = db.relationship(
        "TagGroup",
        back_populates="category",
        order_by="TagGroup.sort_order",
    )

    def __repr__(self) -> str:
        return f"<Category {self.slug}>"
