"""Entry point — wires Config → VisionClient → PlantIdentifier → front end."""
import logging

from rich.logging import RichHandler

from src.config import Config, provider_label
from src.constants import MSG_API_KEY_MISSING, MSG_BOT_STARTING
from src.identifier import PlantIdentifier
from src.telegram.client import TelegramClient
from src.vision.factory import make_vision_client

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def bootstrap() -> tuple[Config, PlantIdentifier]:
    """Load config once, set up logging, build the identifier."""
    config = Config.from_env()
    _setup_logging(config.log_level)

    match config.api_key:
        case None:
            logger.warning(MSG_API_KEY_MISSING, provider_label(config.vision_provider))
        case _:
            pass

    identifier = PlantIdentifier(make_vision_client(config), strict=config.strict_parsing)
    return config, identifier


def main() -> None:
    config, identifier = bootstrap()
    logger.info(MSG_BOT_STARTING)
    client = TelegramClient(config, identifier)
    client.run()


if __name__ == "__main__":
    main()
