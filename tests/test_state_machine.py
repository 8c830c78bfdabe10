"""Tests for the free-text transition table."""

import pytest

from careermentor.dialogue.modes import Mode
from careermentor.dialogue.state import ConversationState
from careermentor.dialogue.state_machine import Effect, apply, decide, split_list


@pytest.mark.parametrize(
    "mode, next_mode, effect, field",
    [
        (Mode.AWAITING_NAME, Mode.AWAITING_ROLE, Effect.STORE, "name"),
        (Mode.AWAITING_ROLE, Mode.AWAITING_EXPERIENCE, Effect.STORE, "role"),
        (Mode.AWAITING_EXPERIENCE, Mode.AWAITING_STRENGTHS, Effect.STORE, "experience"),
        (Mode.AWAITING_STRENGTHS, Mode.AWAITING_WEAKNESSES, Effect.STORE, "strengths"),
        (Mode.AWAITING_WEAKNESSES, Mode.IDLE, Effect.GENERATE_PLAN, "weaknesses"),
        (Mode.AWAITING_ROLE_FOR_MOCK, Mode.IDLE, Effect.GENERATE_QUESTION, "role"),
        (Mode.AWAITING_PROFILE_FOR_PLAN, Mode.IDLE, Effect.GENERATE_PLAN, "role"),
        (Mode.AWAITING_ANSWER, Mode.IDLE, Effect.GENERATE_FEEDBACK, "last_answer"),
        (Mode.IDLE, Mode.IDLE, Effect.NONE, None),
    ],
)
def test_transition_table(mode, next_mode, effect, field):
    transition = decide(mode)
    assert transition.next_mode == next_mode
    assert transition.effect == effect
    assert transition.field == field


def test_every_mode_has_a_transition():
    for mode in Mode:
        assert decide(mode).next_mode in Mode


def test_split_list_trims_and_keeps_order():
    assert split_list("Python, SQL ,  Leadership") == ["Python", "SQL", "Leadership"]


def test_split_list_passes_empty_entries_through():
    assert split_list("Go,,Rust,") == ["Go", "", "Rust", ""]


def test_apply_stores_scalar_and_advances():
    state = ConversationState(mode=Mode.AWAITING_NAME)
    transition = apply(state, "Dana")
    assert state.name == "Dana"
    assert state.mode == Mode.AWAITING_ROLE
    assert transition.effect == Effect.STORE


def test_apply_stores_list_fields():
    state = ConversationState(mode=Mode.AWAITING_STRENGTHS)
    apply(state, "Go, distributed systems")
    assert state.strengths == ["Go", "distributed systems"]
    assert state.mode == Mode.AWAITING_WEAKNESSES


def test_apply_in_idle_is_noop():
    state = ConversationState(name="Dana")
    before = state.model_dump()
    transition = apply(state, "hello there")
    assert transition.effect == Effect.NONE
    assert state.model_dump() == before


def test_apply_answer_stores_last_answer():
    state = ConversationState(mode=Mode.AWAITING_ANSWER, last_question="Why Go?")
    transition = apply(state, "Because of goroutines")
    assert state.last_answer == "Because of goroutines"
    assert state.mode == Mode.IDLE
    assert transition.effect == Effect.GENERATE_FEEDBACK


def test_profiling_sequence():
    state = ConversationState(mode=Mode.AWAITING_NAME)
    effects = [apply(state, text).effect for text in ["Dana", "Backend Engineer", "3", "Go, distributed systems", "Testing"]]

    assert effects == [Effect.STORE] * 4 + [Effect.GENERATE_PLAN]
    assert state.name == "Dana"
    assert state.role == "Backend Engineer"
    assert state.experience == "3"
    assert state.strengths == ["Go", "distributed systems"]
    assert state.weaknesses == ["Testing"]
    assert state.mode == Mode.IDLE
