# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供隔离环境变量、测试应用与种子数据.
"""

from datetime import UTC, datetime

import pytest

from pinkstar import create_app, db
from pinkstar.constants import ItemType, ProjectStatus, TagType, UserRole
from pinkstar.models.category import Category
from pinkstar.models.item import Item
from pinkstar.models.profile import Profile
from pinkstar.models.resource import Resource, ResourceTagAssignment
from pinkstar.models.resource_file import ResourceFile, ResourceFileTagAssignment
from pinkstar.models.tag import Tag
from pinkstar.models.tag_group import TagGroup, TagGroupMembership
from pinkstar.settings import Settings


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 只依赖内存 SQLite
    - 避免开发者本机环境变量影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.delenv("LOG_FILE", raising=False)


@pytest.fixture
def app():
    """创建测试应用实例并建表."""
    app = create_app(settings=Settings.load())
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """创建测试客户端."""
    return app.test_client()


def _ts(day: int) -> datetime:
    return datetime(2026, 1, day, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def seeded_catalog(app):
    """写入一个最小可用的目录.

    minecraft(game) / mods:
    - 标签组 loader(资源级): fabric, forge, quilt
    - 标签组 version(资源级+文件级): v1-20, v1-19
    - 标签组 empty(资源级): unused, 没有任何资源使用
    - dark-mode-theme{fabric}, light-theme{fabric, forge}, forge-essentials{forge, 文件 v1-20},
      secret-draft{quilt, 草稿}
    minecraft / maps: skyblock{}
    terraria(game): 无资源
    """
    author = Profile(id="author-1", name="Pink Author", usertag="pink", role=UserRole.USUARIO)
    other_author = Profile(id="author-2", name="Other", usertag="other", role=UserRole.VIP)

    minecraft = Item(
        slug="minecraft",
        name="Minecraft",
        item_type=ItemType.GAME,
        description="Block building game",
        followers_count=10,
        created_at=_ts(1),
        updated_at=_ts(1),
    )
    terraria = Item(
        slug="terraria",
        name="Terraria",
        item_type=ItemType.GAME,
        description="2D sandbox",
        followers_count=50,
        created_at=_ts(2),
        updated_at=_ts(2),
    )
    db.session.add_all([author, other_author, minecraft, terraria])
    db.session.flush()

    mods = Category(parent_item_id=minecraft.id, name="Mods", slug="mods", sort_order=0)
    maps = Category(parent_item_id=minecraft.id, name="Maps", slug="maps", sort_order=1)
    db.session.add_all([mods, maps])
    db.session.flush()

    tags = {
        tag_id: Tag(id=tag_id, name=name, tag_type=tag_type)
        for tag_id, name, tag_type in (
            ("fabric", "Fabric", TagType.LOADER),
            ("forge", "Forge", TagType.LOADER),
            ("quilt", "Quilt", TagType.LOADER),
            ("v1-20", "1.20", TagType.VERSION),
            ("v1-19", "1.19", TagType.VERSION),
            ("unused", "Unused", TagType.MISC),
        )
    }
    db.session.add_all(tags.values())

    loader = TagGroup(
        id="mods-loader",
        category_id=mods.id,
        display_name="Loader",
        sort_order=0,
        applies_to_resources=True,
        applies_to_files=False,
    )
    version = TagGroup(
        id="mods-version",
        category_id=mods.id,
        display_name="Version",
        sort_order=1,
        applies_to_resources=True,
        applies_to_files=True,
    )
    empty = TagGroup(id="mods-empty", category_id=mods.id, display_name="Empty", sort_order=2)
    db.session.add_all([loader, version, empty])
    db.session.flush()

    db.session.add_all(
        [
            TagGroupMembership(group_id="mods-loader", tag_id="fabric", sort_order=0),
            TagGroupMembership(group_id="mods-loader", tag_id="forge", sort_order=1),
            TagGroupMembership(group_id="mods-loader", tag_id="quilt", sort_order=2),
            TagGroupMembership(group_id="mods-version", tag_id="v1-20", sort_order=0),
            TagGroupMembership(group_id="mods-version", tag_id="v1-19", sort_order=1),
            TagGroupMembership(group_id="mods-empty", tag_id="unused", sort_order=0),
        ],
    )

    def _resource(slug: str, name: str, **kwargs) -> Resource:
        return Resource(
            slug=slug,
            name=name,
            parent_item_id=minecraft.id,
            category_id=kwargs.pop("category_id", mods.id),
            author_id=kwargs.pop("author_id", author.id),
            status=kwargs.pop("status", ProjectStatus.PUBLISHED),
            **kwargs,
        )

    dark = _resource(
        "dark-mode-theme",
        "Dark Mode Theme",
        description="A sleek theme",
        downloads=100,
        rating=4.5,
        created_at=_ts(3),
        updated_at=_ts(10),
    )
    light = _resource(
        "light-theme",
        "Light Theme",
        description="Uses dark colors once",
        downloads=300,
        rating=3.0,
        created_at=_ts(4),
        updated_at=_ts(5),
    )
    forge_essentials = _resource(
        "forge-essentials",
        "Forge Essentials",
        description="Server utilities",
        downloads=200,
        rating=None,
        created_at=_ts(5),
        updated_at=_ts(6),
    )
    draft = _resource(
        "secret-draft",
        "Secret Draft",
        description="Work in progress",
        status=ProjectStatus.DRAFT,
        downloads=999,
        created_at=_ts(6),
        updated_at=_ts(7),
    )
    skyblock = _resource(
        "skyblock",
        "Skyblock",
        description="Island map",
        category_id=maps.id,
        author_id=other_author.id,
        downloads=50,
        created_at=_ts(7),
        updated_at=_ts(8),
    )
    db.session.add_all([dark, light, forge_essentials, draft, skyblock])
    db.session.flush()

    db.session.add_all(
        [
            ResourceTagAssignment(resource_id=dark.id, group_id="mods-loader", tag_id="fabric"),
            ResourceTagAssignment(resource_id=light.id, group_id="mods-loader", tag_id="fabric"),
            ResourceTagAssignment(resource_id=light.id, group_id="mods-loader", tag_id="forge"),
            ResourceTagAssignment(resource_id=forge_essentials.id, group_id="mods-loader", tag_id="forge"),
            ResourceTagAssignment(resource_id=draft.id, group_id="mods-loader", tag_id="quilt"),
        ],
    )

    essentials_file = ResourceFile(
        resource_id=forge_essentials.id,
        name="forge-essentials-2.0.jar",
        version_name="2.0",
        channel_id="beta",
        changelog="Initial port",
        downloads=20,
        created_at=_ts(6),
        updated_at=_ts(6),
    )
    db.session.add(essentials_file)
    db.session.flush()
    db.session.add(ResourceFileTagAssignment(file_id=essentials_file.id, group_id="mods-version", tag_id="v1-20"))
    db.session.commit()

    return {
        "item_id": minecraft.id,
        "mods_id": mods.id,
        "maps_id": maps.id,
        "dark_id": dark.id,
        "light_id": light.id,
        "essentials_id": forge_essentials.id,
        "draft_id": draft.id,
        "skyblock_id": skyblock.id,
        "essentials_file_id": essentials_file.id,
    }
