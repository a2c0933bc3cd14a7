from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_GEMINI_MODEL,
    MSG_TOKEN_MISSING,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    SUPPORTED_PROVIDERS,
)
from src.errors import ConfigurationMissing


_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    vision_provider: str
    gemini_api_key: Optional[str]
    gemini_model: str
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    log_level: str
    telegram_bot_token: Optional[str]
    allowed_chat_id: Optional[str]
    camera_index: int
    strict_parsing: bool

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("VISION_PROVIDER", PROVIDER_GEMINI)
        gemini_api_key = os.getenv("GEMINI_API_KEY") or None
        gemini_model = os.getenv("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        log_level = os.getenv("LOG_LEVEL", "INFO")
        token = os.getenv("TELEGRAM_BOT_TOKEN") or None
        chat_id = os.getenv("ALLOWED_CHAT_ID") or None
        camera_index = os.getenv("CAMERA_INDEX", "0")
        strict = os.getenv("STRICT_PARSING", "true")

        return cls._validate(
            vision_provider=provider.strip().lower(),
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            log_level=log_level,
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            camera_index=camera_index,
            strict_parsing=strict.strip().lower() in _TRUTHY,
        )

    @staticmethod
    def _validate(
        vision_provider: str,
        gemini_api_key: Optional[str],
        gemini_model: str,
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        log_level: str,
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        camera_index: str,
        strict_parsing: bool,
    ) -> "Config":
        match vision_provider:
            case p if p in SUPPORTED_PROVIDERS:
                pass
            case other:
                raise ValueError(
                    f"VISION_PROVIDER must be one of {', '.join(SUPPORTED_PROVIDERS)}, got {other!r}"
                )

        try:
            index = int(camera_index)
        except ValueError:
            raise ValueError(f"CAMERA_INDEX must be an integer, got {camera_index!r}") from None

        return Config(
            vision_provider=vision_provider,
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            log_level=log_level,
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            camera_index=index,
            strict_parsing=strict_parsing,
        )

    @property
    def api_key(self) -> Optional[str]:
        """Credential for the selected vision provider, or None when unset."""
        keys = {
            PROVIDER_GEMINI: self.gemini_api_key,
            PROVIDER_CLAUDE: self.anthropic_api_key,
        }
        return keys.get(self.vision_provider, self.openai_api_key)

    def require_telegram_token(self) -> str:
        match self.telegram_bot_token:
            case None | "":
                raise ConfigurationMissing(MSG_TOKEN_MISSING)
            case token:
                return token


def provider_label(provider: str) -> str:
    """Human label for log lines, e.g. 'Gemini'."""
    return {PROVIDER_GEMINI: "Gemini", PROVIDER_CLAUDE: "Anthropic"}.get(provider, "OpenAI")
