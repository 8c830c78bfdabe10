"""Typed results of orchestration calls.

Orchestration never talks to the transport. It yields these values and the
reply layer decides what the user sees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Generation features, used to pick the generic error message."""
    QUESTION = "question"
    FEEDBACK = "feedback"
    PLAN = "plan"
    RESUME = "resume"
    EXPLAIN = "explain"


class PromptKind(str, Enum):
    """Prompts issued instead of generating when a prerequisite is missing."""
    ROLE_FOR_MOCK = "role_for_mock"
    ROLE_FOR_PLAN = "role_for_plan"
    NO_QUESTION = "no_question"


class Outcome:
    """Base class for everything orchestration can yield."""


@dataclass
class PromptIssued(Outcome):
    kind: PromptKind


@dataclass
class QuestionIssued(Outcome):
    question: str


@dataclass
class FeedbackGiven(Outcome):
    feedback: str


@dataclass
class FollowUpIssued(Outcome):
    question: str


@dataclass
class SessionCompleted(Outcome):
    follow_ups: int


@dataclass
class PlanReady(Outcome):
    plan: str


@dataclass
class ResumeReviewed(Outcome):
    review: str


@dataclass
class ExplanationReady(Outcome):
    explanation: str


@dataclass
class UploadRejected(Outcome):
    """A document upload failed validation; ``message`` is user-facing."""
    message: str


@dataclass
class Failure(Outcome):
    """A generation or extraction step failed.

    ``error`` keeps the underlying exception for logging; it is never shown
    to the user.
    """
    operation: Operation
    error: Exception
