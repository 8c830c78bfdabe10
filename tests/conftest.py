"""Shared fixtures for the career mentor tests."""

import pytest

from careermentor.dialogue.store import ConversationStore
from careermentor.dispatcher import Dispatcher
from careermentor.orchestration import MentorOrchestrator

from fakes import FakeExtractor, FakeLLMClient, FakeTransport


@pytest.fixture
def llm():
    return FakeLLMClient()


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def orchestrator(llm, extractor):
    return MentorOrchestrator(llm, extractor=extractor)


@pytest.fixture
def store():
    return ConversationStore()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def dispatcher(transport, orchestrator, store):
    return Dispatcher(transport, orchestrator, store)
