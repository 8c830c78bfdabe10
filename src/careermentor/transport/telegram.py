"""Telegram Bot API transport over aiohttp.

Uses ``getUpdates`` long polling, so no public webhook endpoint is needed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import aiohttp

from ..config import TelegramConfig
from ..errors import TransportError
from ..models import CommandEvent, DocumentEvent, InboundEvent, TextEvent
from .base import Transport

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096
RETRY_DELAY = 5.0


def parse_command(text: str) -> tuple[str, str]:
    """Split ``/name@bot args`` into ``("name", "args")``."""
    token, _, args = text.strip().partition(" ")
    name = token[1:].split("@", 1)[0]
    return name, args.strip()


def parse_update(update: Dict[str, Any]) -> Optional[InboundEvent]:
    """Translate a Bot API update into an inbound event.

    Returns None for updates the bot does not handle (edits, stickers,
    channel posts and so on).
    """
    message = update.get("message")
    if not isinstance(message, dict) or "chat" not in message:
        return None

    conversation_id = str(message["chat"]["id"])

    document = message.get("document")
    if isinstance(document, dict):
        return DocumentEvent(
            conversation_id=conversation_id,
            file_handle=document["file_id"],
            mime_type=document.get("mime_type"),
            file_size=document.get("file_size"),
            file_name=document.get("file_name"),
        )

    text = message.get("text")
    if not text:
        return None
    if text.startswith("/"):
        name, args = parse_command(text)
        return CommandEvent(conversation_id=conversation_id, name=name, args=args)
    return TextEvent(conversation_id=conversation_id, text=text)


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Split long text into chunks Telegram accepts, preferring line breaks."""
    chunks: List[str] = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n")
    chunks.append(text)
    return chunks


class TelegramTransport(Transport):
    """Transport backed by the Telegram Bot HTTP API.

    Example usage:
        transport = TelegramTransport(TelegramConfig(token="123:abc"))
        async for event in transport.events():
            ...
    """

    def __init__(self, config: TelegramConfig, session: Optional[aiohttp.ClientSession] = None):
        if not config.token:
            raise TransportError("Telegram bot token is not configured")
        self.config = config
        self._base = f"{config.api_url.rstrip('/')}/bot{config.token}"
        self._file_base = f"{config.api_url.rstrip('/')}/file/bot{config.token}"
        self._session = session
        self._offset: Optional[int] = None
        self._closed = False

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def _call(self, method: str, payload: Optional[Dict[str, Any]] = None, timeout: float = 30) -> Any:
        """Call a Bot API method and return its ``result``.

        Raises:
            TransportError: On HTTP failure or an ``ok: false`` response.
        """
        session = await self._get_session()
        try:
            async with session.post(
                f"{self._base}/{method}",
                json=payload or {},
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            raise TransportError(f"Telegram {method} timed out after {timeout} seconds")
        except (aiohttp.ClientError, ValueError) as e:
            raise TransportError(f"Telegram {method} failed: {e}")

        if not isinstance(data, dict) or not data.get("ok"):
            description = data.get("description") if isinstance(data, dict) else data
            raise TransportError(f"Telegram {method} error: {description}")
        return data.get("result")

    async def events(self) -> AsyncIterator[InboundEvent]:
        poll_timeout = self.config.poll_timeout
        while not self._closed:
            payload: Dict[str, Any] = {"timeout": poll_timeout, "allowed_updates": ["message"]}
            if self._offset is not None:
                payload["offset"] = self._offset
            try:
                updates = await self._call("getUpdates", payload, timeout=poll_timeout + 10)
            except TransportError as e:
                logger.warning("Polling failed, retrying in %.0fs: %s", RETRY_DELAY, e)
                await asyncio.sleep(RETRY_DELAY)
                continue

            for update in updates or []:
                self._offset = update["update_id"] + 1
                try:
                    event = parse_update(update)
                except (ValueError, KeyError, TypeError, AttributeError) as e:
                    logger.warning("Dropping malformed update %s: %s", update.get("update_id"), e)
                    continue
                if event is None:
                    logger.debug("Skipping update %s", update.get("update_id"))
                    continue
                yield event

    async def send_message(
        self,
        conversation_id: str,
        text: str,
        keyboard: Optional[List[List[str]]] = None,
    ) -> None:
        chunks = split_message(text)
        for i, chunk in enumerate(chunks):
            payload: Dict[str, Any] = {"chat_id": conversation_id, "text": chunk}
            # Keyboard goes on the last chunk only
            if keyboard and i == len(chunks) - 1:
                payload["reply_markup"] = {
                    "keyboard": [[{"text": button} for button in row] for row in keyboard],
                    "resize_keyboard": True,
                    "one_time_keyboard": False,
                }
            await self._call("sendMessage", payload)

    async def resolve_file_content(self, file_handle: str) -> bytes:
        info = await self._call("getFile", {"file_id": file_handle})
        file_path = info.get("file_path") if isinstance(info, dict) else None
        if not file_path:
            raise TransportError(f"Telegram returned no file path for {file_handle}")

        session = await self._get_session()
        try:
            async with session.get(
                f"{self._file_base}/{file_path}",
                timeout=aiohttp.ClientTimeout(total=60),
            ) as response:
                if response.status != 200:
                    raise TransportError(f"File download returned status {response.status}")
                return await response.read()
        except asyncio.TimeoutError:
            raise TransportError("File download timed out")
        except aiohttp.ClientError as e:
            raise TransportError(f"File download failed: {e}")

    async def register_commands(self, commands: Dict[str, str]) -> None:
        payload = {
            "commands": [
                {"command": name, "description": description}
                for name, description in commands.items()
            ]
        }
        try:
            await self._call("setMyCommands", payload)
        except TransportError as e:
            logger.warning("Could not register commands: %s", e)

    async def close(self) -> None:
        self._closed = True
        if self._session is not None and not self._session.closed:
            await self._session.close()
