import pytest

from src.config import Config


def build_config(**overrides) -> Config:
    values = dict(
        vision_provider="gemini",
        gemini_api_key=None,
        gemini_model="gemini-1.5-flash",
        anthropic_api_key=None,
        openai_api_key=None,
        log_level="INFO",
        telegram_bot_token=None,
        allowed_chat_id=None,
        camera_index=0,
        strict_parsing=True,
    )
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def make_config():
    return build_config
