import pytest

from pinkstar.settings import Settings


@pytest.mark.unit
def test_production_requires_database_url(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "prod-secret")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings.load()


@pytest.mark.unit
def test_production_requires_secret_key(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pass@db/pinkstar")
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings.load()


@pytest.mark.unit
def test_non_production_falls_back_to_sqlite(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings.load()

    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("pinkstar_dev.db")
    assert settings.is_testing is True
    assert settings.debug is False


@pytest.mark.unit
def test_cors_origins_accept_csv_and_json(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert Settings.load().cors_origins == ("https://a.example", "https://b.example")

    monkeypatch.setenv("CORS_ORIGINS", '["https://c.example"]')
    assert Settings.load().cors_origins == ("https://c.example",)


@pytest.mark.unit
def test_page_size_cross_field_validation(monkeypatch) -> None:
    monkeypatch.setenv("RESOURCES_DEFAULT_PAGE_SIZE", "50")
    monkeypatch.setenv("RESOURCES_MAX_PAGE_SIZE", "10")

    with pytest.raises(ValueError, match="配置校验失败"):
        Settings.load()


@pytest.mark.unit
def test_flask_config_exposes_page_sizes(monkeypatch) -> None:
    monkeypatch.setenv("RESOURCES_DEFAULT_PAGE_SIZE", "15")

    config = Settings.load().to_flask_config()

    assert config["RESOURCES_DEFAULT_PAGE_SIZE"] == 15
    assert config["RESOURCES_MAX_PAGE_SIZE"] == 100
    assert config["TESTING"] is True
    assert config["SQLALCHEMY_DATABASE_URI"] == "sqlite:///:memory:"
