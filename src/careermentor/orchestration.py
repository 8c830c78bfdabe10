"""Generation orchestration for the mentor flow.

Each feature (mock question, feedback with follow-up, prep plan, resume
review, explanation) is an async generator yielding ``Outcome`` values as
they become available, so the caller can show the critique before the
follow-up request has finished.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, Optional

from .config import MentorConfig
from .dialogue.modes import Mode
from .dialogue.state import ConversationState
from .errors import ExtractionError, GenerationError, InputValidationError
from .extractor import DocumentExtractor, PdfExtractor
from .formatter import strip_markup
from .llm_client import LLMClient
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
)
from .prompts import render_template

logger = logging.getLogger(__name__)

PLAN_DAYS = 10


class MentorOrchestrator:
    """Composes LLM calls with state updates for each mentor feature.

    The orchestrator owns no conversation state; callers pass in the
    ``ConversationState`` to read and update.

    Example:
        orchestrator = MentorOrchestrator(llm_client)
        async for outcome in orchestrator.generate_question(state):
            ...
    """

    def __init__(
        self,
        llm_client: LLMClient,
        extractor: Optional[DocumentExtractor] = None,
        config: Optional[MentorConfig] = None,
    ):
        self.llm_client = llm_client
        self.extractor = extractor or PdfExtractor()
        self.config = config or MentorConfig()

    async def _generate(self, template: str, context: Dict[str, Any]) -> str:
        prompt = render_template(template, context)
        response = await self.llm_client.generate_completion(prompt)
        return strip_markup(response)

    async def generate_question(self, state: ConversationState) -> AsyncIterator[Outcome]:
        """Issue a mock interview question for the candidate.

        Asks for the role first if it is not known yet.
        """
        if not state.role:
            state.mode = Mode.AWAITING_ROLE_FOR_MOCK
            yield PromptIssued(PromptKind.ROLE_FOR_MOCK)
            return

        try:
            question = await self._generate("mock_question.jinja", state.profile_context())
        except GenerationError as e:
            logger.warning("Question generation failed: %s", e)
            yield Failure(Operation.QUESTION, e)
            return

        state.last_question = question
        state.last_answer = None
        state.follow_ups = 0
        state.mode = Mode.AWAITING_ANSWER
        yield QuestionIssued(question)

    async def give_feedback(self, state: ConversationState) -> AsyncIterator[Outcome]:
        """Critique the last answer, then ask a follow-up while under the limit."""
        if not state.last_question or state.last_answer is None:
            yield PromptIssued(PromptKind.NO_QUESTION)
            return

        try:
            feedback = await self._generate(
                "feedback.jinja",
                {"question": state.last_question, "answer": state.last_answer},
            )
        except GenerationError as e:
            logger.warning("Feedback generation failed: %s", e)
            yield Failure(Operation.FEEDBACK, e)
            return

        yield FeedbackGiven(feedback)

        if state.follow_ups >= self.config.follow_up_limit:
            yield SessionCompleted(state.follow_ups)
            return

        context = state.profile_context()
        context.update(question=state.last_question, answer=state.last_answer)
        try:
            follow_up = await self._generate("follow_up.jinja", context)
        except GenerationError as e:
            logger.warning("Follow-up generation failed: %s", e)
            yield Failure(Operation.FEEDBACK, e)
            return

        state.last_question = follow_up
        state.last_answer = None
        state.follow_ups += 1
        state.mode = Mode.AWAITING_ANSWER
        yield FollowUpIssued(follow_up)

    async def request_plan(self, state: ConversationState) -> AsyncIterator[Outcome]:
        """Entry point for ``/plan``: collect the role first if the profile is incomplete.

        Only the role is asked for, even when the name is the missing part.
        """
        if not state.name or not state.role:
            state.mode = Mode.AWAITING_PROFILE_FOR_PLAN
            yield PromptIssued(PromptKind.ROLE_FOR_PLAN)
            return

        async for outcome in self.generate_plan(state):
            yield outcome

    async def generate_plan(self, state: ConversationState) -> AsyncIterator[Outcome]:
        """Generate the prep plan from whatever profile is stored."""
        context = state.profile_context()
        context["days"] = PLAN_DAYS
        try:
            plan = await self._generate("prep_plan.jinja", context)
        except GenerationError as e:
            logger.warning("Plan generation failed: %s", e)
            yield Failure(Operation.PLAN, e)
            return

        yield PlanReady(plan)

    def check_upload(self, mime_type: Optional[str], file_size: Optional[int]) -> None:
        """Validate a resume upload before downloading it.

        Raises:
            InputValidationError: If the document is not a PDF or too large.
        """
        if not mime_type or not mime_type.lower().endswith("pdf"):
            raise InputValidationError("Please upload a PDF.")
        if file_size is not None and file_size > self.config.resume_max_bytes:
            limit_mb = self.config.resume_max_bytes // (1024 * 1024)
            raise InputValidationError(f"Please upload a PDF under {limit_mb}MB.")

    async def review_resume(self, data: bytes) -> AsyncIterator[Outcome]:
        """Review a resume PDF. Conversation state is not touched."""
        try:
            text = await asyncio.to_thread(self.extractor.extract_text, data)
            text = text[: self.config.resume_char_limit]
            review = await self._generate("resume_review.jinja", {"resume_text": text})
        except (ExtractionError, GenerationError) as e:
            logger.warning("Resume review failed: %s", e)
            yield Failure(Operation.RESUME, e)
            return

        yield ResumeReviewed(review)

    async def explain_question(self, state: ConversationState) -> AsyncIterator[Outcome]:
        """Explain the most recent question."""
        if not state.last_question:
            yield PromptIssued(PromptKind.NO_QUESTION)
            return

        try:
            explanation = await self._generate("explain.jinja", {"question": state.last_question})
        except GenerationError as e:
            logger.warning("Explanation failed: %s", e)
            yield Failure(Operation.EXPLAIN, e)
            return

        yield ExplanationReady(explanation)
