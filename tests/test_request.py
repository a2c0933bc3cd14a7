"""Inference request builder."""
import base64

from src.constants import IDENTIFY_PROMPT
from src.image_source import ImagePayload
from src.vision.request import InlineImage, build_request

EXPECTED_PROMPT = """Identify the plant in this image and provide the following information:
1. Common Name: [Primary name of the plant]
2. Alternative Name: [Another common name, if applicable. If none, write "None"]
3. Scientific Name: [Botanical name of the plant]
4. Description: [A brief description of the plant's appearance, characteristics, and care requirements]

Please format your response exactly as follows:
Common Name: [Answer]
Alternative Name: [Answer]
Scientific Name: [Answer]
Description: [Answer]"""


def test_prompt_is_verbatim():
    assert IDENTIFY_PROMPT == EXPECTED_PROMPT


def test_build_request_base64_encodes_bytes():
    payload = ImagePayload.from_upload(b"\x00\xffimage", "image/png", "h")

    request = build_request(payload)

    assert request.prompt == IDENTIFY_PROMPT
    assert request.image.mime_type == "image/png"
    assert request.image.data == base64.b64encode(b"\x00\xffimage").decode()
    assert request.image.raw_bytes() == b"\x00\xffimage"


def test_prompt_is_constant_across_payloads():
    a = build_request(ImagePayload.from_upload(b"a", "image/jpeg", "caption one"))
    b = build_request(ImagePayload.from_upload(b"b", "image/jpeg", "caption two"))

    assert a.prompt == b.prompt == IDENTIFY_PROMPT


def test_data_url():
    image = InlineImage(data="ZGF0YQ==", mime_type="image/webp")

    assert image.data_url() == "data:image/webp;base64,ZGF0YQ=="
