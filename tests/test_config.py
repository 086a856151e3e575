import pytest
from pydantic import ValidationError

from config import Settings

ENV_KEYS = ["HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT", "MOCK_LATENCY_SECONDS", "SEED_DATA",
            "DEFAULT_LANGUAGE", "CORS_ORIGINS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = Settings()
    assert settings.port == 8000
    assert settings.log_format == "console"
    assert settings.mock_latency_seconds == 0.0
    assert settings.seed_data is True
    assert settings.cors_origins == ["*"]


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("SEED_DATA", "false")
    monkeypatch.setenv("MOCK_LATENCY_SECONDS", "0.5")
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000", "http://localhost:5173"]')

    settings = Settings()
    assert settings.port == 9001
    assert settings.seed_data is False
    assert settings.mock_latency_seconds == 0.5
    assert settings.log_format == "json"
    assert settings.cors_origins == ["http://localhost:3000", "http://localhost:5173"]


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("PORT=7000\nDEFAULT_LANGUAGE=hi\n", encoding="utf-8")
    settings = Settings()
    assert settings.port == 7000
    assert settings.default_language == "hi"


@pytest.mark.parametrize("key,value", [
    ("LOG_FORMAT", "xml"),
    ("PORT", "not-a-port"),
    ("MOCK_LATENCY_SECONDS", "-1"),
])
def test_bad_values_are_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()
