"""Config loading from the environment."""
import pytest
from src.config import Config, provider_label
from src.constants import PROVIDER_CLAUDE, PROVIDER_GEMINI, PROVIDER_OPENAI
from src.errors import ConfigurationMissing


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for name in (
        "VISION_PROVIDER",
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
        "TELEGRAM_BOT_TOKEN",
        "ALLOWED_CHAT_ID",
        "CAMERA_INDEX",
        "STRICT_PARSING",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults():
    """Nothing set: gemini provider, no key, camera 0, strict parsing."""
    config = Config.from_env()

    assert config.vision_provider == "gemini"
    assert config.gemini_model == "gemini-1.5-flash"
    assert config.api_key is None
    assert config.camera_index == 0
    assert config.strict_parsing is True
    assert config.telegram_bot_token is None


def test_missing_api_key_is_not_fatal():
    """The credential is optional at load time; calls fail later."""
    config = Config.from_env()

    assert config.gemini_api_key is None


def test_gemini_key_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")

    config = Config.from_env()

    assert config.api_key == "g-key"
    assert config.gemini_model == "gemini-2.5-flash"


def test_api_key_follows_provider(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "Claude")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-oai")

    config = Config.from_env()

    assert config.vision_provider == "claude"
    assert config.api_key == "sk-ant"


def test_openai_provider_key(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-oai")

    assert Config.from_env().api_key == "sk-oai"


def test_blank_key_becomes_none(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")

    assert Config.from_env().gemini_api_key is None


def test_unknown_provider_fails(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "llava")

    with pytest.raises(ValueError, match="VISION_PROVIDER"):
        Config.from_env()


def test_camera_index_must_be_int(monkeypatch):
    monkeypatch.setenv("CAMERA_INDEX", "front")

    with pytest.raises(ValueError, match="CAMERA_INDEX"):
        Config.from_env()


def test_camera_index_parsed(monkeypatch):
    monkeypatch.setenv("CAMERA_INDEX", "2")

    assert Config.from_env().camera_index == 2


@pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("TRUE", True), ("yes", True)])
def test_strict_parsing_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("STRICT_PARSING", raw)

    assert Config.from_env().strict_parsing is expected


def test_telegram_fields_from_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot123:ABC")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "987654321")

    config = Config.from_env()

    assert config.require_telegram_token() == "bot123:ABC"
    assert config.allowed_chat_id == "987654321"


def test_require_telegram_token_missing(make_config):
    with pytest.raises(ConfigurationMissing, match="TELEGRAM_BOT_TOKEN"):
        make_config().require_telegram_token()


def test_config_immutable(make_config):
    """Frozen dataclass: attribute assignment must fail."""
    config = make_config()

    with pytest.raises(Exception):
        config.vision_provider = "openai"


def test_provider_label():
    assert provider_label("gemini") == "Gemini"
    assert provider_label("claude") == "Anthropic"
    assert provider_label("openai") == "OpenAI"


@pytest.mark.parametrize(
    "provider,expected",
    [(PROVIDER_GEMINI, "g"), (PROVIDER_CLAUDE, "a"), (PROVIDER_OPENAI, "o")],
)
def test_api_key_for_each_provider(make_config, provider, expected):
    config = make_config(
        vision_provider=provider, gemini_api_key="g", anthropic_api_key="a", openai_api_key="o"
    )

    assert config.api_key == expected
