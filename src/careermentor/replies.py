"""User-facing text for the mentor bot.

Orchestration yields ``Outcome`` values; this module turns them (and the
fixed command responses) into ``Reply`` objects the transport can send.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .dialogue.modes import Mode
from .dialogue.state import ConversationState
from .outcomes import (
    ExplanationReady,
    Failure,
    FeedbackGiven,
    FollowUpIssued,
    Operation,
    Outcome,
    PlanReady,
    PromptIssued,
    PromptKind,
    QuestionIssued,
    ResumeReviewed,
    SessionCompleted,
    UploadRejected,
)

Keyboard = List[List[str]]

MAIN_KEYBOARD: Keyboard = [
    ["/mock", "/plan"],
    ["/resume", "/help", "/cancel"],
]


@dataclass
class Reply:
    """A message to send, with an optional reply keyboard."""
    text: str
    keyboard: Optional[Keyboard] = None


WELCOME = "Welcome to AI Career Mentor! Let's create your profile.\nWhat's your name?"
SESSION_CLEARED = "Session cleared."
RESUME_REQUEST = "Send your resume as a PDF file (under 5MB)."

PROMPTS: Dict[PromptKind, str] = {
    PromptKind.ROLE_FOR_MOCK: "To generate a question, which role are you preparing for?",
    PromptKind.ROLE_FOR_PLAN: "To create a personalized plan, let's first know your role.",
    PromptKind.NO_QUESTION: "No question yet. Use /mock first.",
}

ERRORS: Dict[Operation, str] = {
    Operation.QUESTION: "Error generating personalized question.",
    Operation.FEEDBACK: "Error generating feedback/follow-up.",
    Operation.PLAN: "Error generating prep plan.",
    Operation.RESUME: "Error reading resume.",
    Operation.EXPLAIN: "Error generating explanation.",
}


def help_text(commands: Dict[str, str]) -> str:
    lines = ["Quick help:"]
    for name, description in commands.items():
        lines.append(f"- /{name} - {description}")
    return "\n".join(lines)


def unknown_command(name: str) -> str:
    return f"Unknown command: /{name}. Type /help for available commands."


def profile_prompt(state: ConversationState) -> Optional[str]:
    """Question to ask after a profiling answer was stored, based on the new mode."""
    if state.mode == Mode.AWAITING_ROLE:
        return f"Hi {state.name}! Which role are you preparing for?"
    if state.mode == Mode.AWAITING_EXPERIENCE:
        return "How many years of experience do you have?"
    if state.mode == Mode.AWAITING_STRENGTHS:
        return "List your strengths (comma separated)."
    if state.mode == Mode.AWAITING_WEAKNESSES:
        return "List your weaknesses (comma separated)."
    return None


def render(outcome: Outcome) -> Reply:
    """Turn an orchestration outcome into the message shown to the user."""
    if isinstance(outcome, PromptIssued):
        return Reply(PROMPTS[outcome.kind])
    if isinstance(outcome, QuestionIssued):
        return Reply(f"Mock question:\n\n{outcome.question}\n\nReply with your answer.")
    if isinstance(outcome, FeedbackGiven):
        return Reply(f"Feedback:\n{outcome.feedback}")
    if isinstance(outcome, FollowUpIssued):
        return Reply(
            f"Follow-up question:\n{outcome.question}\n\nReply with your answer or type /cancel to stop."
        )
    if isinstance(outcome, SessionCompleted):
        return Reply("Mini-interview session completed. Type /mock to start again.", MAIN_KEYBOARD)
    if isinstance(outcome, PlanReady):
        return Reply(f"Here's your personalized prep plan:\n\n{outcome.plan}", MAIN_KEYBOARD)
    if isinstance(outcome, ResumeReviewed):
        return Reply(f"Resume review:\n{outcome.review}")
    if isinstance(outcome, ExplanationReady):
        return Reply(f"Explanation:\n{outcome.explanation}")
    if isinstance(outcome, UploadRejected):
        return Reply(outcome.message)
    if isinstance(outcome, Failure):
        return Reply(ERRORS[outcome.operation])
    raise TypeError(f"Unhandled outcome: {outcome!r}")
