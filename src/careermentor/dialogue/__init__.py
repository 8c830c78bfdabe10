"""Per-conversation dialogue handling.

Key components:
- Mode: the discrete dialogue states
- ConversationState: the session record for one conversation
- ConversationStore: one state record (and lock) per conversation
- decide / apply: the transition table for free-text input
"""

from .modes import Mode
from .state import ConversationState
from .state_machine import Effect, Transition, apply, decide, split_list
from .store import ConversationStore

__all__ = [
    "Mode",
    "ConversationState",
    "Effect",
    "Transition",
    "apply",
    "decide",
    "split_list",
    "ConversationStore",
]
