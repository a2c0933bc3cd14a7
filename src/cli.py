"""plant-sage command line: identify from a file, the camera, or run the bot."""
import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from src.camera import CameraSession
from src.constants import MSG_CAMERA_CANCELLED
from src.errors import CameraUnavailable, ConfigurationMissing
from src.identifier import Failed, IdentificationSession, Loading
from src.image_source import ImagePayload
from src.main import bootstrap
from src.main import main as run_bot
from src.presentation import render_state

app = typer.Typer(
    name="plant-sage",
    help="Identify plants from a photo.",
    no_args_is_help=True,
)

console = Console()


def _identify_and_render(session: IdentificationSession, payload: ImagePayload) -> None:
    render_state(console, Loading())
    state = asyncio.run(session.submit(payload))
    render_state(console, state)
    if isinstance(state, Failed):
        raise typer.Exit(1)


@app.command()
def identify(
    path: Annotated[
        Path,
        typer.Argument(help="Image file to identify", exists=True, dir_okay=False, readable=True),
    ],
) -> None:
    """Identify the plant in an image file."""
    _, identifier = bootstrap()
    session = IdentificationSession(identifier)
    _identify_and_render(session, ImagePayload.from_file(path))


@app.command()
def camera(
    index: Annotated[
        Optional[int],
        typer.Option("--index", "-i", help="Camera device index (default: CAMERA_INDEX)"),
    ] = None,
    preview: Annotated[
        bool,
        typer.Option("--preview/--no-preview", help="Show a live preview before capturing"),
    ] = True,
) -> None:
    """Capture a photo from the camera and identify it.

    In the preview window press space to capture or esc to cancel.
    """
    config, identifier = bootstrap()
    session = IdentificationSession(identifier)
    try:
        with CameraSession(config.camera_index if index is None else index) as cam:
            payload = cam.preview() if preview else cam.capture()
    except CameraUnavailable as exc:
        render_state(console, session.fail(str(exc)))
        raise typer.Exit(1) from None

    if payload is None:
        console.print(MSG_CAMERA_CANCELLED, style="dim")
        return
    _identify_and_render(session, payload)


@app.command()
def bot() -> None:
    """Run the Telegram bot."""
    try:
        run_bot()
    except ConfigurationMissing as exc:
        console.print(str(exc), style="red", markup=False)
        raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
