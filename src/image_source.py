"""ImagePayload — one acquired image, independent of how it was acquired."""
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from src.constants import DEFAULT_MIME_TYPE, IMAGE_MIME_PREFIX, UNKNOWN_MIME_TYPE


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    mime_type: str
    # Opaque handle for showing a preview (path, upload id, ...), never submitted.
    preview: str

    @classmethod
    def from_file(cls, path: str | Path) -> "ImagePayload":
        """Read a user-selected file. Content is not checked for being an image."""
        p = Path(path)
        data = p.read_bytes()
        mime_type, _ = mimetypes.guess_type(p.name)
        return cls(data=data, mime_type=mime_type or UNKNOWN_MIME_TYPE, preview=str(p))

    @classmethod
    def from_upload(cls, data: bytes, mime_type: str | None, handle: str) -> "ImagePayload":
        return cls(data=bytes(data), mime_type=mime_type or DEFAULT_MIME_TYPE, preview=handle)

    @property
    def size(self) -> int:
        return len(self.data)


def is_image_mime(mime_type: str | None) -> bool:
    return bool(mime_type) and mime_type.startswith(IMAGE_MIME_PREFIX)
