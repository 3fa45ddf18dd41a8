from types import SimpleNamespace

import pytest

from pinkstar.services.search.item_scorer import score_item


@pytest.mark.unit
def test_score_item_weights() -> None:
    item = SimpleNamespace(name="Minecraft", description="Block building game")

    assert score_item(item, "minecraft") == 10 + 5 + 10
    assert score_item(item, "mine") == 10 + 5
    assert score_item(item, "craft") == 10
    assert score_item(item, "building") == 3
    assert score_item(item, "terraria") == 0
    assert score_item(item, "  ") == 0


@pytest.mark.unit
def test_score_item_handles_missing_description() -> None:
    item = SimpleNamespace(name="Terraria", description=None)
    assert score_item(item, "sandbox") == 0
