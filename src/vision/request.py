"""Request builder — turns an ImagePayload into the fixed identification request."""
import base64
from dataclasses import dataclass

from src.constants import IDENTIFY_PROMPT
from src.image_source import ImagePayload


@dataclass(frozen=True)
class InlineImage:
    data: str  # standard base64
    mime_type: str

    def raw_bytes(self) -> bytes:
        return base64.standard_b64decode(self.data)

    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class InferenceRequest:
    prompt: str
    image: InlineImage


def build_request(payload: ImagePayload) -> InferenceRequest:
    image_data = base64.standard_b64encode(payload.data).decode()
    return InferenceRequest(
        prompt=IDENTIFY_PROMPT,
        image=InlineImage(data=image_data, mime_type=payload.mime_type),
    )
