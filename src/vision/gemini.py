"""GeminiVisionClient — Google Gemini backend (default)."""
from google.genai import Client, types

from src.vision.client import VisionClient
from src.vision.request import InferenceRequest


class GeminiVisionClient(VisionClient):

    def __init__(self, api_key: str, model: str) -> None:
        self._api_key = api_key
        self._model = model

    async def generate(self, request: InferenceRequest) -> str:
        client = Client(api_key=self._api_key)
        image = types.Part.from_bytes(
            data=request.image.raw_bytes(),
            mime_type=request.image.mime_type,
        )
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=[request.prompt, image],
        )
        return response.text or ""
