"""VisionClient — abstract base for plant identification backends."""
from abc import ABC, abstractmethod

from src.vision.request import InferenceRequest


class VisionClient(ABC):
    @abstractmethod
    async def generate(self, request: InferenceRequest) -> str:
        """Send the prompt and inline image, return the raw reply text. Raises on failure."""
        ...
