"""bootstrap(): config, logging and identifier wiring."""
import logging

import pytest

from src.errors import ConfigurationMissing
from src.identifier import PlantIdentifier
from src.main import bootstrap, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)
    for name in ("VISION_PROVIDER", "GEMINI_API_KEY", "TELEGRAM_BOT_TOKEN", "ALLOWED_CHAT_ID"):
        monkeypatch.delenv(name, raising=False)


def test_missing_api_key_logs_warning_and_continues(caplog):
    with caplog.at_level(logging.WARNING, logger="src.main"):
        config, identifier = bootstrap()

    assert config.api_key is None
    assert isinstance(identifier, PlantIdentifier)
    assert "Gemini API key is not set" in caplog.text


def test_present_api_key_logs_nothing(monkeypatch, caplog):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")

    with caplog.at_level(logging.WARNING, logger="src.main"):
        bootstrap()

    assert "API key" not in caplog.text


def test_bot_without_token_raises():
    with pytest.raises(ConfigurationMissing):
        main()
