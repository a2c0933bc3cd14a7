"""Telegram loading indicator — repeats the TYPING chat action until stopped."""
import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator

from telegram import Bot
from telegram.constants import ChatAction

from src.bot_client import TypingIndicator
from src.constants import TELEGRAM_TYPING_INTERVAL

logger = logging.getLogger(__name__)


class TelegramTypingIndicator(TypingIndicator):

    def __init__(self, bot: Bot, interval: float = TELEGRAM_TYPING_INTERVAL) -> None:
        self._bot = bot
        self._interval = interval
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def active(self) -> frozenset[str]:
        return frozenset(self._tasks)

    async def _pulse(self, chat_id: str) -> None:
        while True:
            try:
                await self._bot.send_chat_action(chat_id=int(chat_id), action=ChatAction.TYPING)
            except Exception as exc:
                logger.debug("Typing action failed: %s", exc)
            await asyncio.sleep(self._interval)

    async def start(self, to: str) -> None:
        await self.stop(to)
        self._tasks[to] = asyncio.create_task(self._pulse(to))

    async def stop(self, to: str) -> None:
        match self._tasks.pop(to, None):
            case None:
                pass
            case task:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    @contextlib.asynccontextmanager
    async def showing(self, to: str) -> AsyncIterator[None]:
        """Show the indicator for the duration of the block, cleared on any exit."""
        await self.start(to)
        try:
            yield
        finally:
            await self.stop(to)
