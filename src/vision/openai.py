"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from openai import AsyncOpenAI

from src.constants import OPENAI_VISION_MODEL
from src.vision.client import VisionClient
from src.vision.request import InferenceRequest


class OpenAIVisionClient(VisionClient):

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    async def generate(self, request: InferenceRequest) -> str:
        client = AsyncOpenAI(api_key=self._api_key)
        response = await client.chat.completions.create(
            model=OPENAI_VISION_MODEL,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": request.prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": request.image.data_url()},
                        },
                    ],
                }
            ],
        )
        content = response.choices[0].message.content
        return content or ""
