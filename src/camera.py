"""CameraSession — scoped access to a video capture device.

The device is opened on ``__enter__`` and released as soon as a frame has been
captured, the preview is cancelled, or the block exits with an error. Nothing
outside this module touches the capture handle.
"""
import logging
from typing import Any, Callable, Optional

import cv2

from src.constants import (
    CAMERA_CANCEL_KEYS,
    CAMERA_CAPTURE_KEYS,
    CAMERA_JPEG_EXT,
    CAMERA_PREVIEW_HANDLE,
    CAMERA_WARMUP_FRAMES,
    CAMERA_WINDOW_TITLE,
    DEFAULT_MIME_TYPE,
    MSG_CAMERA_ENCODE_FAILED,
    MSG_CAMERA_NO_FRAME,
    MSG_CAMERA_PREVIEW_FAILED,
    MSG_CAMERA_RELEASED,
    MSG_CAMERA_UNAVAILABLE,
)
from src.errors import CameraUnavailable
from src.image_source import ImagePayload

logger = logging.getLogger(__name__)


class CameraSession:

    def __init__(
        self,
        index: int = 0,
        capture_factory: Optional[Callable[[int], Any]] = None,
        warmup_frames: int = CAMERA_WARMUP_FRAMES,
    ) -> None:
        self._index = index
        self._factory = capture_factory
        self._warmup = warmup_frames
        self._capture: Any = None

    # ── scope ─────────────────────────────────────────────────────────────────

    def __enter__(self) -> "CameraSession":
        factory = self._factory or cv2.VideoCapture
        try:
            capture = factory(self._index)
        except Exception as exc:
            logger.warning("Opening camera %s failed: %s", self._index, exc)
            raise CameraUnavailable(MSG_CAMERA_UNAVAILABLE) from exc

        if not capture.isOpened():
            capture.release()
            raise CameraUnavailable(MSG_CAMERA_UNAVAILABLE)
        self._capture = capture
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._capture is None

    def release(self) -> None:
        match self._capture:
            case None:
                pass
            case capture:
                self._capture = None
                capture.release()
                logger.debug(MSG_CAMERA_RELEASED, self._index)

    # ── acquisition ───────────────────────────────────────────────────────────

    def capture(self) -> ImagePayload:
        """Grab the current frame as JPEG and release the device."""
        try:
            frame = self._read_frame(warmup=self._warmup)
            return _encode_frame(frame)
        finally:
            self.release()

    def preview(self) -> Optional[ImagePayload]:
        """Show a live preview; capture on space/enter, return None on esc/q."""
        shown = False
        try:
            while True:
                frame = self._read_frame(warmup=0)
                try:
                    cv2.imshow(CAMERA_WINDOW_TITLE, frame)
                    shown = True
                    key = cv2.waitKey(1) & 0xFF
                except cv2.error as exc:
                    # no GUI backend (headless host, opencv-python-headless)
                    raise CameraUnavailable(MSG_CAMERA_PREVIEW_FAILED % exc) from exc
                match key:
                    case k if k in CAMERA_CAPTURE_KEYS:
                        return _encode_frame(frame)
                    case k if k in CAMERA_CANCEL_KEYS:
                        return None
                    case _:
                        continue
        finally:
            self.release()
            if shown:
                cv2.destroyAllWindows()

    def _read_frame(self, warmup: int) -> Any:
        capture = self._capture
        if capture is None:
            raise CameraUnavailable(MSG_CAMERA_UNAVAILABLE)
        # auto-exposure settles over the first few frames
        for _ in range(warmup):
            capture.read()
        ok, frame = capture.read()
        if not ok or frame is None:
            raise CameraUnavailable(MSG_CAMERA_NO_FRAME)
        return frame


def _encode_frame(frame: Any) -> ImagePayload:
    ok, buffer = cv2.imencode(CAMERA_JPEG_EXT, frame)
    if not ok:
        raise CameraUnavailable(MSG_CAMERA_ENCODE_FAILED)
    return ImagePayload(
        data=buffer.tobytes(),
        mime_type=DEFAULT_MIME_TYPE,
        preview=CAMERA_PREVIEW_HANDLE,
    )
