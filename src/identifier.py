"""Identification pipeline and the per-session view model."""
import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from src.constants import (
    MSG_IDENTIFY_FAILED,
    MSG_IDENTIFY_OK,
    MSG_STALE_RESPONSE,
    MSG_SUBMITTING,
)
from src.errors import InferenceFailed, PlantSageError
from src.image_source import ImagePayload
from src.parser import IdentificationRecord, parse_response
from src.vision.client import VisionClient
from src.vision.request import build_request

logger = logging.getLogger(__name__)


class PlantIdentifier:
    """Payload → request → one model call → parsed record."""

    def __init__(self, vision_client: VisionClient, strict: bool = True) -> None:
        self._client = vision_client
        self._strict = strict

    async def identify(self, payload: ImagePayload) -> IdentificationRecord:
        logger.debug(MSG_SUBMITTING, payload.size, payload.mime_type, payload.preview)
        request = build_request(payload)
        try:
            text = await self._client.generate(request)
        except Exception as exc:
            raise InferenceFailed(str(exc)) from exc
        return parse_response(text, strict=self._strict)


# ── view states ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Identified:
    record: IdentificationRecord


ViewState = Union[Idle, Loading, Failed, Identified]


class IdentificationSession:
    """Holds exactly one view state and applies only the latest attempt's outcome."""

    def __init__(self, identifier: PlantIdentifier) -> None:
        self._identifier = identifier
        self._state: ViewState = Idle()
        self._latest = 0

    @property
    def state(self) -> ViewState:
        return self._state

    def _next_token(self) -> int:
        self._latest += 1
        return self._latest

    def _apply(self, token: int, state: ViewState) -> Optional[ViewState]:
        match token == self._latest:
            case True:
                self._state = state
                return state
            case False:
                logger.info(MSG_STALE_RESPONSE, token, self._latest)
                return None

    async def submit(self, payload: ImagePayload) -> Optional[ViewState]:
        """Run one attempt. Returns its final state, or None if a newer attempt superseded it."""
        token = self._next_token()
        self._state = Loading()
        start = time.time()
        try:
            record = await self._identifier.identify(payload)
        except PlantSageError as exc:
            logger.error(MSG_IDENTIFY_FAILED, exc, exc_info=exc)
            return self._apply(token, Failed(MSG_IDENTIFY_FAILED % exc))
        logger.info(MSG_IDENTIFY_OK, record.name, time.time() - start)
        return self._apply(token, Identified(record))

    def fail(self, message: str) -> ViewState:
        """Surface an acquisition error; supersedes any in-flight attempt."""
        self._next_token()
        self._state = Failed(message)
        return self._state
