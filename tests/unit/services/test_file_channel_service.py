import pytest

from pinkstar.constants import TagType
from pinkstar.services.files.file_channel_service import list_file_channels, map_file_channel_to_tag


@pytest.mark.unit
def test_list_file_channels_order() -> None:
    assert [channel.id for channel in list_file_channels()] == ["release", "beta", "alpha"]


@pytest.mark.unit
def test_map_file_channel_to_tag() -> None:
    tag = map_file_channel_to_tag(" Release ")

    assert tag is not None
    assert tag.id == "channel-release"
    assert tag.name == "Release"
    assert tag.tag_type == TagType.CHANNEL
    assert tag.color == "hsl(145 63% 42%)"
    assert map_file_channel_to_tag("nightly") is None
    assert map_file_channel_to_tag(None) is None
