"""Pick the configured vision backend."""
from src.config import Config
from src.constants import PROVIDER_CLAUDE, PROVIDER_GEMINI
from src.vision.claude import ClaudeVisionClient
from src.vision.client import VisionClient
from src.vision.gemini import GeminiVisionClient
from src.vision.openai import OpenAIVisionClient


def make_vision_client(config: Config) -> VisionClient:
    # A missing key is passed through: the call itself fails with an auth error.
    key = config.api_key or ""
    provider = config.vision_provider
    if provider == PROVIDER_GEMINI:
        return GeminiVisionClient(key, config.gemini_model)
    if provider == PROVIDER_CLAUDE:
        return ClaudeVisionClient(key)
    return OpenAIVisionClient(key)
