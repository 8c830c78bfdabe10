"""Routes inbound events to command handlers, the state machine, or resume review.

Every event runs as its own task while holding its conversation's lock, so
events for one conversation are handled in arrival order and a failure in
one handler never affects another conversation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Dict, Optional, Set

from . import replies
from .dialogue.modes import Mode
from .dialogue.state import ConversationState
from .dialogue.state_machine import Effect, apply
from .dialogue.store import ConversationStore
from .errors import InputValidationError, TransportError
from .models import CommandEvent, DocumentEvent, InboundEvent, TextEvent
from .orchestration import MentorOrchestrator
from .outcomes import Failure, Operation, Outcome, UploadRejected
from .replies import MAIN_KEYBOARD, Reply
from .transport.base import Transport

logger = logging.getLogger(__name__)


class Dispatcher:
    """Connects a transport to the mentor flow.

    Example:
        dispatcher = Dispatcher(transport, MentorOrchestrator(llm_client))
        await dispatcher.run()
    """

    # Command names and their one-line descriptions, in menu order
    COMMANDS: Dict[str, str] = {
        "start": "Welcome and profile setup",
        "mock": "Get AI-generated interview question",
        "plan": "Get your 10-day personalized prep plan",
        "resume": "Upload a PDF for review",
        "explain": "Explain the last question",
        "help": "How to use the bot",
        "cancel": "Reset session",
    }

    def __init__(
        self,
        transport: Transport,
        orchestrator: MentorOrchestrator,
        store: Optional[ConversationStore] = None,
    ):
        self.transport = transport
        self.orchestrator = orchestrator
        self.store = store if store is not None else ConversationStore()
        self._tasks: Set[asyncio.Task] = set()

    async def run(self) -> None:
        """Consume transport events until it stops, one task per event."""
        await self.transport.register_commands(self.COMMANDS)
        try:
            async for event in self.transport.events():
                task = asyncio.create_task(self.dispatch(event))
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)
        finally:
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)

    async def dispatch(self, event: InboundEvent) -> None:
        """Handle one event and send every reply it produces."""
        conversation_id = event.conversation_id
        logger.debug("Dispatching %s for conversation %s", type(event).__name__, conversation_id)
        async with self.store.locked(conversation_id):
            try:
                async for reply in self._route(event):
                    await self.transport.send_message(conversation_id, reply.text, reply.keyboard)
            except TransportError as e:
                logger.warning("Could not reply to conversation %s: %s", conversation_id, e)
            except Exception:
                logger.exception("Handler failed for conversation %s", conversation_id)

    def _route(self, event: InboundEvent) -> AsyncIterator[Reply]:
        if isinstance(event, CommandEvent):
            return self._handle_command(event)
        if isinstance(event, DocumentEvent):
            return self._handle_document(event)
        if isinstance(event, TextEvent):
            return self._handle_text(event)
        raise TypeError(f"Unsupported event: {event!r}")

    async def _rendered(self, outcomes: AsyncIterator[Outcome]) -> AsyncIterator[Reply]:
        async for outcome in outcomes:
            yield replies.render(outcome)

    async def _handle_command(self, event: CommandEvent) -> AsyncIterator[Reply]:
        cid = event.conversation_id
        cmd = event.name

        if cmd == "start":
            state = self.store.reset(cid)
            state.mode = Mode.AWAITING_NAME
            yield Reply(replies.WELCOME)

        elif cmd == "help":
            yield Reply(replies.help_text(self.COMMANDS), MAIN_KEYBOARD)

        elif cmd == "cancel":
            self.store.reset(cid)
            yield Reply(replies.SESSION_CLEARED, MAIN_KEYBOARD)

        elif cmd == "resume":
            self.store.reset(cid)
            yield Reply(replies.RESUME_REQUEST)

        elif cmd == "mock":
            async for reply in self._rendered(self.orchestrator.generate_question(self.store.get(cid))):
                yield reply

        elif cmd == "plan":
            async for reply in self._rendered(self.orchestrator.request_plan(self.store.get(cid))):
                yield reply

        elif cmd == "explain":
            async for reply in self._rendered(self.orchestrator.explain_question(self.store.get(cid))):
                yield reply

        else:
            yield Reply(replies.unknown_command(cmd))

    async def _handle_text(self, event: TextEvent) -> AsyncIterator[Reply]:
        state = self.store.get(event.conversation_id)
        transition = apply(state, event.text)
        logger.debug(
            "Conversation %s: %s -> %s", event.conversation_id, transition.effect.value, transition.next_mode.value
        )

        if transition.effect == Effect.STORE:
            prompt = replies.profile_prompt(state)
            if prompt:
                yield Reply(prompt)
        elif transition.effect != Effect.NONE:
            async for reply in self._rendered(self._generation_for(transition.effect, state)):
                yield reply

    def _generation_for(self, effect: Effect, state: ConversationState) -> AsyncIterator[Outcome]:
        if effect == Effect.GENERATE_QUESTION:
            return self.orchestrator.generate_question(state)
        if effect == Effect.GENERATE_PLAN:
            return self.orchestrator.generate_plan(state)
        if effect == Effect.GENERATE_FEEDBACK:
            return self.orchestrator.give_feedback(state)
        raise ValueError(f"No generation for effect {effect}")

    async def _handle_document(self, event: DocumentEvent) -> AsyncIterator[Reply]:
        try:
            self.orchestrator.check_upload(event.mime_type, event.file_size)
        except InputValidationError as e:
            logger.info("Rejected upload in conversation %s: %s", event.conversation_id, e)
            yield replies.render(UploadRejected(str(e)))
            return

        try:
            data = await self.transport.resolve_file_content(event.file_handle)
        except TransportError as e:
            logger.warning("Could not fetch document %s: %s", event.file_handle, e)
            yield replies.render(Failure(Operation.RESUME, e))
            return

        async for reply in self._rendered(self.orchestrator.review_resume(data)):
            yield reply
