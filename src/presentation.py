"""Rendering of view states — plain text for chat, rich for the terminal."""
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from src.constants import CARD_ALSO_KNOWN_AS, MSG_IDENTIFYING
from src.identifier import Failed, Identified, Idle, Loading, ViewState
from src.parser import IdentificationRecord


def format_record(record: IdentificationRecord) -> str:
    """Result card: name, optional alternative name, scientific name, description."""
    lines = [record.name or ""]
    if record.alternative_name:
        lines.append(CARD_ALSO_KNOWN_AS % record.alternative_name)
    lines += [record.scientific_name or "", "", record.description or ""]
    return "\n".join(lines).strip()


def _record_text(record: IdentificationRecord) -> Text:
    text = Text()
    text.append(record.name or "", style="bold green")
    if record.alternative_name:
        text.append("\n" + CARD_ALSO_KNOWN_AS % record.alternative_name, style="green")
    text.append("\n" + (record.scientific_name or ""), style="italic dim")
    text.append("\n\n" + (record.description or ""))
    return text


def render_state(console: Console, state: ViewState) -> None:
    match state:
        case Idle():
            pass
        case Loading():
            console.print(MSG_IDENTIFYING, style="dim")
        case Failed(message=message):
            console.print(message, style="red", markup=False)
        case Identified(record=record):
            console.print(Panel(_record_text(record), border_style="green", expand=False))
