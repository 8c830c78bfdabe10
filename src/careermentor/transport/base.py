"""Abstract chat transport.

A transport delivers inbound events and sends replies. The dispatcher only
talks to this interface, so the mentor flow runs the same over Telegram or
a local console.
"""

from __future__ import annotations

import abc
from typing import AsyncIterator, Dict, List, Optional

from ..models import InboundEvent


class Transport(abc.ABC):
    """Abstract base class for chat transports."""

    @abc.abstractmethod
    def events(self) -> AsyncIterator[InboundEvent]:
        """Yield inbound events until the transport is closed."""

    @abc.abstractmethod
    async def send_message(
        self,
        conversation_id: str,
        text: str,
        keyboard: Optional[List[List[str]]] = None,
    ) -> None:
        """Send ``text`` to a conversation, optionally with a reply keyboard.

        Raises:
            TransportError: If the message could not be delivered.
        """

    @abc.abstractmethod
    async def resolve_file_content(self, file_handle: str) -> bytes:
        """Download the content behind a document's file handle.

        Raises:
            TransportError: If the file could not be fetched.
        """

    async def register_commands(self, commands: Dict[str, str]) -> None:
        """Advertise the command list to the chat client, where supported."""

    async def close(self) -> None:
        """Stop producing events and release resources."""
