"""Abstract interfaces for transport-agnostic bot clients."""
from abc import ABC, abstractmethod


class TypingIndicator(ABC):
    """Loading indicator shown while an identification is in flight."""

    @abstractmethod
    async def start(self, to: str) -> None: ...

    @abstractmethod
    async def stop(self, to: str) -> None: ...


class BotClient(ABC):
    @abstractmethod
    def run(self) -> None: ...

    @abstractmethod
    async def send_message(self, to: str, text: str) -> bool: ...
