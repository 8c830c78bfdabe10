"""Conversation modes for the mentor dialogue.

Invariants:
- Exactly one mode is active per conversation
- The mode alone decides how the next free-text message is read
- Orchestration may re-enter AWAITING_ANSWER; everything else is set by the
  state machine or a command handler
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Mode(str, Enum):
    """Dialogue modes, string-valued for logging and serialization."""
    IDLE = "idle"
    AWAITING_NAME = "awaiting_name"
    AWAITING_ROLE = "awaiting_role"
    AWAITING_EXPERIENCE = "awaiting_experience"
    AWAITING_STRENGTHS = "awaiting_strengths"
    AWAITING_WEAKNESSES = "awaiting_weaknesses"
    AWAITING_ROLE_FOR_MOCK = "awaiting_role_for_mock"
    AWAITING_PROFILE_FOR_PLAN = "awaiting_profile_for_plan"
    AWAITING_ANSWER = "awaiting_answer"

    @property
    def profile_field(self) -> Optional[str]:
        """State field that text received in this mode is stored into."""
        return {
            Mode.AWAITING_NAME: "name",
            Mode.AWAITING_ROLE: "role",
            Mode.AWAITING_EXPERIENCE: "experience",
            Mode.AWAITING_STRENGTHS: "strengths",
            Mode.AWAITING_WEAKNESSES: "weaknesses",
            Mode.AWAITING_ROLE_FOR_MOCK: "role",
            Mode.AWAITING_PROFILE_FOR_PLAN: "role",
            Mode.AWAITING_ANSWER: "last_answer",
        }.get(self)

    @property
    def is_list_field(self) -> bool:
        """Whether input in this mode is a comma separated list."""
        return self in (Mode.AWAITING_STRENGTHS, Mode.AWAITING_WEAKNESSES)
