"""
PinkStar - 资源文件模型
"""

from pinkstar import db
from pinkstar.constants.file_channels import DEFAULT_FILE_CHANNEL
from pinkstar.utils.time_utils import time_utils


class ResourceFile(db.Model):
    """资源下的单个可下载文件.

    文件拥有自己的标签分配(仅限 applies_to_files 的标签组)与单选发布通道.
    """

    __tablename__ = "resource_files"

    id = db.Column(db.Integer, primary_key=True)
    resource_id = db.Column(db.Integer, db.ForeignKey("resources.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    url = db.Column(db.String(500), nullable=True)
    version_name = db.Column(db.String(100), nullable=True)
    size = db.Column(db.String(40), nullable=True)
    channel_id = db.Column(db.String(20), nullable=False, default=DEFAULT_FILE_CHANNEL)
    changelog = db.Column(db.Text, nullable=True)
    downloads = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=time_utils.now)
    updated_at = db.Column(db.DateTime(timezone=True), default=time_utils.now, onupdate=time_utils.now)

    resource = db.relationship("Resource", back_populates="files")
    tag_assignments = db.relationship(
        "ResourceFileTagAssignment",
        back_populates="file",
        cascade="all, delete-orphan",
    )


class ResourceFileTagAssignment(db.Model):
    """文件级标签分配,按标签组记录."""

    __tablename__ = "resource_file_tags"

    file_id = db.Column(db.Integer, db.ForeignKey("resource_files.id"), primary_key=True)
    group_id = db.Column(db.String(64), db.ForeignKey("tag_groups.id"), primary_key=True)
    tag_id = db.Column(db.String(64), db.ForeignKey("tags.id"), primary_key=True)

    file = db.relationship("ResourceFile", back_populates="tag_assignments")
    tag = db.relationship("Tag")
