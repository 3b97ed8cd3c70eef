from dataaccess.config import Settings


def test_database_url_from_driver_and_name(monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.setenv("DB_NAME", "other.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite:///other.db"


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DB_URL", "sqlite://")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite://"


def test_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("DB_ECHO", "true")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DB_ECHO is True
