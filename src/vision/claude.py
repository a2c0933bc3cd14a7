"""ClaudeVisionClient — Anthropic Claude vision backend."""
from anthropic import AsyncAnthropic

from src.constants import CLAUDE_MAX_TOKENS, CLAUDE_VISION_MODEL
from src.vision.client import VisionClient
from src.vision.request import InferenceRequest


class ClaudeVisionClient(VisionClient):

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    async def generate(self, request: InferenceRequest) -> str:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=CLAUDE_VISION_MODEL,
            max_tokens=CLAUDE_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": request.prompt},
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": request.image.mime_type,
                                "data": request.image.data,
                            },
                        },
                    ],
                }
            ],
        )
        return message.content[0].text
