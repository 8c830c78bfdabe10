"""In-memory conversation store.

Holds one ``ConversationState`` per conversation identifier, created on
first access and never evicted. Each conversation also gets an
``asyncio.Lock`` so handlers for the same conversation run one at a time,
in arrival order, while different conversations stay independent.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from .state import ConversationState

logger = logging.getLogger(__name__)


class ConversationStore:
    """Keyed store of conversation states.

    Example:
        store = ConversationStore()
        state = store.get("42")          # created with mode=idle
        async with store.locked("42") as state:
            ...                          # exclusive for conversation 42
        store.reset("42")
    """

    def __init__(self) -> None:
        self._states: Dict[str, ConversationState] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def get(self, conversation_id: str) -> ConversationState:
        """Return the state for a conversation, creating it if needed."""
        state = self._states.get(conversation_id)
        if state is None:
            logger.debug("Creating state for conversation %s", conversation_id)
            state = ConversationState()
            self._states[conversation_id] = state
        return state

    def reset(self, conversation_id: str) -> ConversationState:
        """Replace the state for a conversation with a fresh default."""
        state = ConversationState()
        self._states[conversation_id] = state
        return state

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    @asynccontextmanager
    async def locked(self, conversation_id: str) -> AsyncIterator[ConversationState]:
        """Hold the conversation's lock for the duration of the block."""
        lock = self._locks.setdefault(conversation_id, asyncio.Lock())
        async with lock:
            yield self.get(conversation_id)
