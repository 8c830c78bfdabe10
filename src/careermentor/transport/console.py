"""Local console transport using rich.

Runs the mentor flow in a terminal as a single conversation. A line that
names an existing ``.pdf`` file is treated as a resume upload.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import AsyncIterator, Callable, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..errors import TransportError
from ..models import CommandEvent, DocumentEvent, InboundEvent, TextEvent
from .base import Transport
from .telegram import parse_command

CONSOLE_CONVERSATION_ID = "console"


def parse_line(line: str, conversation_id: str = CONSOLE_CONVERSATION_ID) -> Optional[InboundEvent]:
    """Translate one line of terminal input into an inbound event."""
    text = line.strip()
    if not text:
        return None

    # Checked before commands so absolute paths like /home/me/cv.pdf upload
    path = Path(text).expanduser()
    if path.suffix.lower() == ".pdf" and path.is_file():
        return DocumentEvent(
            conversation_id=conversation_id,
            file_handle=str(path),
            mime_type="application/pdf",
            file_size=path.stat().st_size,
            file_name=path.name,
        )

    if text.startswith("/"):
        name, args = parse_command(text)
        return CommandEvent(conversation_id=conversation_id, name=name, args=args)
    return TextEvent(conversation_id=conversation_id, text=text)


class ConsoleTransport(Transport):
    """Transport reading stdin and printing replies with rich."""

    def __init__(self, console: Optional[Console] = None, read_line: Optional[Callable[[], str]] = None):
        self.console = console or Console()
        self._read_line = read_line or (lambda: self.console.input("> "))
        self._closed = False

    async def events(self) -> AsyncIterator[InboundEvent]:
        while not self._closed:
            try:
                line = await asyncio.to_thread(self._read_line)
            except EOFError:
                return
            event = parse_line(line)
            if event is not None:
                yield event

    async def send_message(
        self,
        conversation_id: str,
        text: str,
        keyboard: Optional[List[List[str]]] = None,
    ) -> None:
        self.console.print(Panel(Text(text), title="Mentor", title_align="left"))
        if keyboard:
            buttons = "  ".join(button for row in keyboard for button in row)
            self.console.print(buttons, style="dim", markup=False)

    async def resolve_file_content(self, file_handle: str) -> bytes:
        try:
            return await asyncio.to_thread(Path(file_handle).read_bytes)
        except OSError as e:
            raise TransportError(f"Could not read {file_handle}: {e}")

    async def close(self) -> None:
        self._closed = True
