"""Transition table for free-text messages.

``decide`` is a pure lookup from the current mode to the next mode and the
effect to perform. ``apply`` performs the store part of that effect on a
state record; generation effects are left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .modes import Mode
from .state import ConversationState


class Effect(str, Enum):
    """What to do after storing the input."""
    NONE = "none"
    STORE = "store"
    GENERATE_QUESTION = "generate_question"
    GENERATE_PLAN = "generate_plan"
    GENERATE_FEEDBACK = "generate_feedback"


@dataclass(frozen=True)
class Transition:
    """Result of interpreting one text message.

    Attributes:
        next_mode: Mode after the message
        effect: Follow-up action for the caller
        field: State field the text was stored into, if any
    """
    next_mode: Mode
    effect: Effect
    field: Optional[str] = None


_TABLE: Dict[Mode, tuple] = {
    Mode.AWAITING_NAME: (Mode.AWAITING_ROLE, Effect.STORE),
    Mode.AWAITING_ROLE: (Mode.AWAITING_EXPERIENCE, Effect.STORE),
    Mode.AWAITING_EXPERIENCE: (Mode.AWAITING_STRENGTHS, Effect.STORE),
    Mode.AWAITING_STRENGTHS: (Mode.AWAITING_WEAKNESSES, Effect.STORE),
    Mode.AWAITING_WEAKNESSES: (Mode.IDLE, Effect.GENERATE_PLAN),
    Mode.AWAITING_ROLE_FOR_MOCK: (Mode.IDLE, Effect.GENERATE_QUESTION),
    Mode.AWAITING_PROFILE_FOR_PLAN: (Mode.IDLE, Effect.GENERATE_PLAN),
    Mode.AWAITING_ANSWER: (Mode.IDLE, Effect.GENERATE_FEEDBACK),
}


def split_list(text: str) -> List[str]:
    """Split comma separated input, trimming each entry.

    Empty entries are kept: ``"a,,b"`` gives ``["a", "", "b"]``.
    """
    return [item.strip() for item in text.split(",")]


def decide(mode: Mode) -> Transition:
    """Look up the transition for a text message received in ``mode``."""
    if mode not in _TABLE:
        return Transition(next_mode=mode, effect=Effect.NONE)
    next_mode, effect = _TABLE[mode]
    return Transition(next_mode=next_mode, effect=effect, field=mode.profile_field)


def apply(state: ConversationState, text: str) -> Transition:
    """Store ``text`` according to the current mode and advance the mode.

    Returns:
        The transition taken, so the caller can run its effect.
    """
    transition = decide(state.mode)
    if transition.field is not None:
        value = split_list(text) if state.mode.is_list_field else text
        setattr(state, transition.field, value)
    state.mode = transition.next_mode
    return transition
