"""Pydantic models for inbound chat events.

Transports translate their native updates into these and hand them to the
dispatcher.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field


class CommandEvent(BaseModel):
    """A ``/command`` sent by the user."""

    conversation_id: str
    name: str
    args: str = ""


class TextEvent(BaseModel):
    """A free-text message."""

    conversation_id: str
    text: str


class DocumentEvent(BaseModel):
    """A document attachment; content is fetched through the transport."""

    conversation_id: str
    file_handle: str
    mime_type: Optional[str] = None
    file_size: Optional[int] = Field(default=None, description="Size in bytes as reported by the transport")
    file_name: Optional[str] = None


InboundEvent = Union[CommandEvent, TextEvent, DocumentEvent]
