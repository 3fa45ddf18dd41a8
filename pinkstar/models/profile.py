"""
PinkStar - 用户资料模型
"""

from pinkstar import db
from pinkstar.constants import UserRole


class Profile(db.Model):
    """资源作者资料."""

    __tablename__ = "profiles"

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    usertag = db.Column(db.String(64), nullable=False, unique=True)
    avatar_url = db.Column(db.String(500), nullable=True)
    role = db.Column(db.String(20), nullable=False, default=UserRole.USUARIO)

    def to_dict(self) -> dict:
        """转换为作者摘要字典."""
        return {
            "id": self.id,
            "name": self.name,
            "usertag": self.usertag,
            "avatar_url": self.avatar_url,
            "role": self.role,
        }
