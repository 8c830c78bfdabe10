"""Session record for one conversation."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .modes import Mode


class ConversationState(BaseModel):
    """Mutable session record for one conversation.

    Created as ``{mode: idle, follow_ups: 0}`` and only ever reset back to
    that default, never removed.
    """

    mode: Mode = Mode.IDLE
    name: Optional[str] = None
    role: Optional[str] = None
    experience: Optional[str] = None
    strengths: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = None
    last_question: Optional[str] = None
    last_answer: Optional[str] = None
    follow_ups: int = 0

    def profile_context(self) -> dict:
        """Candidate profile as template context."""
        return {
            "name": self.name,
            "role": self.role,
            "experience": self.experience,
            "strengths": self.strengths or [],
            "weaknesses": self.weaknesses or [],
        }
