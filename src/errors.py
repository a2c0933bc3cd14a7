"""Error conditions raised along the identification pipeline."""
from src.constants import MSG_MALFORMED_RESPONSE


class PlantSageError(Exception):
    """Base for every condition the pipeline surfaces to the user."""


class ConfigurationMissing(PlantSageError):
    pass


class CameraUnavailable(PlantSageError):
    pass


class InferenceFailed(PlantSageError):
    """The remote model call failed. The message is the stringified cause."""


class MalformedResponse(PlantSageError):
    """The model reply lacked one or more required fields."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(MSG_MALFORMED_RESPONSE % ", ".join(missing))
