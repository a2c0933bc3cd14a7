"""TelegramClient — chat front end via python-telegram-bot."""
import asyncio
import logging
import time
from typing import Callable, Optional

from telegram import Bot, Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from src.bot_client import BotClient
from src.camera import CameraSession
from src.config import Config
from src.constants import (
    CMD_CAMERA,
    CMD_HELP,
    CMD_START,
    MSG_BLOCKED_CHAT,
    MSG_HELP,
    MSG_IDENTIFY_FAILED,
    MSG_NOT_AN_IMAGE,
    MSG_SEND_FAIL,
    MSG_SEND_OK,
)
from src.errors import CameraUnavailable
from src.identifier import Failed, Identified, IdentificationSession, PlantIdentifier, ViewState
from src.image_source import ImagePayload, is_image_mime
from src.presentation import format_record
from src.telegram.typing import TelegramTypingIndicator

logger = logging.getLogger(__name__)


def reply_for(state: Optional[ViewState]) -> Optional[str]:
    """Text to send for a finished attempt; None when there is nothing to say."""
    match state:
        case Identified(record=record):
            return format_record(record)
        case Failed(message=message):
            return message
        case _:
            return None


class TelegramClient(BotClient):

    def __init__(
        self,
        config: Config,
        identifier: PlantIdentifier,
        camera_factory: Optional[Callable[[], CameraSession]] = None,
    ) -> None:
        self._config = config
        self._allowed_chat_id = config.allowed_chat_id
        self._identifier = identifier
        self._camera_factory = camera_factory or (lambda: CameraSession(config.camera_index))
        self._sessions: dict[str, IdentificationSession] = {}
        self._app: Optional[Application] = None

    # ── BotClient interface ───────────────────────────────────────────────────

    def run(self) -> None:
        token = self._config.require_telegram_token()
        self._app = Application.builder().token(token).build()
        self._app.add_handler(TGMessageHandler(filters.PHOTO, self._handle_photo))
        self._app.add_handler(TGMessageHandler(filters.Document.ALL, self._handle_document))
        self._app.add_handler(CommandHandler(CMD_CAMERA, self._handle_camera))
        self._app.add_handler(CommandHandler([CMD_HELP, CMD_START], self._handle_help))
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    await app.bot.send_message(chat_id=int(to), text=text)
                    return True
                except Exception as exc:
                    logger.error("Telegram send_message failed: %s", exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        match self._allowed_chat_id:
            case None:
                return True
            case allowed:
                return str(update.effective_chat.id) == allowed.strip()

    def _sender(self, update: Update) -> Optional[str]:
        match self._is_allowed(update):
            case False:
                chat_id = update.effective_chat.id if update.effective_chat else "?"
                logger.warning(MSG_BLOCKED_CHAT, chat_id)
                return None
            case True:
                return str(update.effective_chat.id)

    def session_for(self, sender: str) -> IdentificationSession:
        match self._sessions.get(sender):
            case None:
                session = IdentificationSession(self._identifier)
                self._sessions[sender] = session
                return session
            case session:
                return session

    # ── handlers ──────────────────────────────────────────────────────────────

    async def _handle_help(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        sender = self._sender(update)
        if sender is not None:
            await self.send_message(sender, MSG_HELP)

    async def _handle_photo(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        sender = self._sender(update)
        photos = update.message.photo if update.message else None
        match (sender, photos):
            case (None, _) | (_, None | []):
                return
            case _:
                pass
        # last size is the largest
        photo = photos[-1]
        try:
            tg_file = await photo.get_file()
            data = await tg_file.download_as_bytearray()
        except Exception as exc:
            logger.exception("Photo download failed")
            await self._report(sender, MSG_IDENTIFY_FAILED % exc)
            return
        payload = ImagePayload.from_upload(bytes(data), None, photo.file_id)
        await self._identify(sender, payload, context.bot)

    async def _handle_document(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        sender = self._sender(update)
        document = update.message.document if update.message else None
        if sender is None or document is None:
            return
        if not is_image_mime(document.mime_type):
            await self.send_message(sender, MSG_NOT_AN_IMAGE)
            return
        try:
            tg_file = await document.get_file()
            data = await tg_file.download_as_bytearray()
        except Exception as exc:
            logger.exception("Document download failed")
            await self._report(sender, MSG_IDENTIFY_FAILED % exc)
            return
        payload = ImagePayload.from_upload(bytes(data), document.mime_type, document.file_id)
        await self._identify(sender, payload, context.bot)

    async def _handle_camera(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        sender = self._sender(update)
        if sender is None:
            return
        try:
            payload = await asyncio.to_thread(self._grab_frame)
        except CameraUnavailable as exc:
            logger.warning("Camera unavailable: %s", exc)
            await self._report(sender, str(exc))
            return
        await self._identify(sender, payload, context.bot)

    def _grab_frame(self) -> ImagePayload:
        """Open, capture and release the camera; blocking, so run off the event loop."""
        with self._camera_factory() as camera:
            return camera.capture()

    async def _report(self, sender: str, message: str) -> None:
        """Show an acquisition error; it supersedes whatever was in flight."""
        await self.send_message(sender, reply_for(self.session_for(sender).fail(message)))

    async def _identify(self, sender: str, payload: ImagePayload, bot: Bot) -> None:
        start = time.time()
        typing = TelegramTypingIndicator(bot)
        async with typing.showing(sender):
            state = await self.session_for(sender).submit(payload)

        match reply_for(state):
            case None:
                return
            case text:
                elapsed = time.time() - start
                success = await self.send_message(sender, text)
                match success:
                    case True:
                        logger.info(MSG_SEND_OK, elapsed)
                    case False:
                        logger.error(MSG_SEND_FAIL, elapsed)
