"""Response parser — model reply text → IdentificationRecord.

The reply is expected (not guaranteed) to hold ``Label: value`` lines. Only the
first colon on a line separates label from value; unknown labels, blank lines
and lines without a colon are ignored. A repeated label keeps its last value.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from src.constants import (
    LABEL_ALTERNATIVE_NAME,
    LABEL_COMMON_NAME,
    LABEL_DESCRIPTION,
    LABEL_SCIENTIFIC_NAME,
    NO_ALTERNATIVE_NAME,
)
from src.errors import MalformedResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentificationRecord:
    name: Optional[str] = None
    alternative_name: Optional[str] = None
    scientific_name: Optional[str] = None
    description: Optional[str] = None


_FIELDS = {
    LABEL_COMMON_NAME: "name",
    LABEL_ALTERNATIVE_NAME: "alternative_name",
    LABEL_SCIENTIFIC_NAME: "scientific_name",
    LABEL_DESCRIPTION: "description",
}

_REQUIRED = (
    (LABEL_COMMON_NAME, "name"),
    (LABEL_SCIENTIFIC_NAME, "scientific_name"),
    (LABEL_DESCRIPTION, "description"),
)


def split_line(line: str) -> tuple[str, str] | None:
    """Return (label, value) split on the first colon, both trimmed."""
    label, sep, value = line.partition(":")
    match sep:
        case "":
            return None
        case _:
            return label.strip(), value.strip()


def _field_value(label: str, value: str) -> Optional[str]:
    match (label, value):
        case (l, v) if l == LABEL_ALTERNATIVE_NAME and v == NO_ALTERNATIVE_NAME:
            return None
        case _:
            return value


def parse_response(text: str, strict: bool = True) -> IdentificationRecord:
    """Parse a model reply.

    With ``strict`` a reply missing any of Common Name, Scientific Name or
    Description raises MalformedResponse. Without it the record is returned
    with those fields left as None.
    """
    fields: dict[str, Optional[str]] = {}
    for line in text.split("\n"):
        pair = split_line(line)
        if pair is None or pair[0] not in _FIELDS:
            continue
        label, value = pair
        fields[_FIELDS[label]] = _field_value(label, value)

    missing = tuple(label for label, attr in _REQUIRED if attr not in fields)
    match (missing, strict):
        case ((), _):
            pass
        case (_, True):
            raise MalformedResponse(missing)
        case _:
            logger.warning("Reply missing %s; keeping partial record", ", ".join(missing))

    return IdentificationRecord(**fields)
