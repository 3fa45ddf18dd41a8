"""File channels namespace."""

from __future__ import annotations

from flask_restx import Namespace, fields, marshal

from pinkstar.api.v1.models.envelope import get_error_envelope_model, make_success_envelope_model
from pinkstar.api.v1.resources.base import BaseResource
from pinkstar.api.v1.restx_models.tags import FILE_CHANNEL_FIELDS
from pinkstar.services.files.file_channel_service import list_file_channels

ns = Namespace("file-channels", description="资源文件发布通道")

ErrorEnvelope = get_error_envelope_model(ns)
FileChannelModel = ns.model("FileChannel", FILE_CHANNEL_FIELDS)

FileChannelsData = ns.model(
    "FileChannelsData",
    {
        "channels": fields.List(fields.Nested(FileChannelModel), description="发布通道列表"),
    },
)

FileChannelsSuccessEnvelope = make_success_envelope_model(ns, "FileChannelsSuccessEnvelope", FileChannelsData)


@ns.route("")
class FileChannelsResource(BaseResource):
    """发布通道列表资源."""

    @ns.response(200, "OK", FileChannelsSuccessEnvelope)
    @ns.response(500, "Internal Server Error", ErrorEnvelope)
    def get(self):
        """获取全部发布通道."""
        return self.success(
            data={"channels": marshal(list_file_channels(), FILE_CHANNEL_FIELDS)},
            message="获取发布通道成功",
        )
