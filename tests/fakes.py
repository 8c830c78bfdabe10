"""Fakes for the LLM client, document extractor and transport."""

import asyncio
from typing import Any, Dict, List, Optional

from careermentor.errors import ExtractionError, TransportError
from careermentor.llm_client import LLMClient
from careermentor.transport.base import Transport


class FakeLLMClient(LLMClient):
    """Records prompts and replays scripted responses.

    Items in ``responses`` are returned in order; an Exception item is
    raised instead. When the script runs out, a numbered default is returned.
    """

    def __init__(self, responses: Optional[List[Any]] = None):
        super().__init__(None)
        self.responses = list(responses or [])
        self.prompts: List[str] = []

    async def generate_completion(self, prompt: str, **kwargs: Any) -> str:
        self.prompts.append(prompt)
        if self.responses:
            response = self.responses.pop(0)
        else:
            response = f"generated {len(self.prompts)}"
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def calls(self) -> int:
        return len(self.prompts)


class FakeExtractor:
    """Returns fixed text, or raises ExtractionError when ``fail`` is set."""

    def __init__(self, text: str = "Resume text", fail: bool = False):
        self.text = text
        self.fail = fail
        self.received: List[bytes] = []

    def extract_text(self, data: bytes) -> str:
        self.received.append(data)
        if self.fail:
            raise ExtractionError("broken pdf")
        return self.text


class FakeTransport(Transport):
    """Collects sent messages; serves files from a dict."""

    def __init__(self, events: Optional[list] = None, files: Optional[Dict[str, bytes]] = None):
        self._events = list(events or [])
        self.files = files or {}
        self.sent: List[tuple] = []
        self.registered: Dict[str, str] = {}

    async def events(self):
        for event in self._events:
            yield event

    async def send_message(self, conversation_id, text, keyboard=None):
        self.sent.append((conversation_id, text, keyboard))

    async def resolve_file_content(self, file_handle):
        if file_handle not in self.files:
            raise TransportError(f"no such file {file_handle}")
        return self.files[file_handle]

    async def register_commands(self, commands):
        self.registered = dict(commands)

    def texts(self, conversation_id=None):
        return [text for cid, text, _ in self.sent if conversation_id is None or cid == conversation_id]


def run(coro):
    return asyncio.run(coro)


async def _collect(agen):
    return [item async for item in agen]


def collect(agen):
    """Drain an async generator of outcomes into a list."""
    return run(_collect(agen))


