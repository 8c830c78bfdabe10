"""Tests for Telegram update parsing and the console transport."""

import pytest

from careermentor.config import TelegramConfig
from careermentor.errors import TransportError
from careermentor.models import CommandEvent, DocumentEvent, TextEvent
from careermentor.transport.console import ConsoleTransport, parse_line
from careermentor.transport.telegram import TelegramTransport, parse_command, parse_update, split_message

from fakes import run


def update(**message):
    message.setdefault("chat", {"id": 77})
    return {"update_id": 1, "message": message}


# ========================
# Telegram parsing
# ========================

def test_text_message():
    event = parse_update(update(text="Backend Engineer"))
    assert event == TextEvent(conversation_id="77", text="Backend Engineer")


def test_command_message():
    event = parse_update(update(text="/start"))
    assert event == CommandEvent(conversation_id="77", name="start")


def test_command_with_bot_suffix_and_args():
    assert parse_command("/mock@MentorBot now please") == ("mock", "now please")


def test_document_message():
    event = parse_update(update(document={
        "file_id": "abc",
        "mime_type": "application/pdf",
        "file_size": 2048,
        "file_name": "cv.pdf",
    }))
    assert isinstance(event, DocumentEvent)
    assert event.file_handle == "abc"
    assert event.mime_type == "application/pdf"
    assert event.file_size == 2048


@pytest.mark.parametrize("raw", [
    {"update_id": 1},
    {"update_id": 1, "edited_message": {"chat": {"id": 1}, "text": "x"}},
    update(sticker={"file_id": "s"}),
    update(text=""),
])
def test_unhandled_updates_are_skipped(raw):
    assert parse_update(raw) is None


def test_split_message_short_text():
    assert split_message("hello") == ["hello"]


def test_split_message_prefers_line_breaks():
    text = "a" * 6 + "\n" + "b" * 6
    assert split_message(text, limit=10) == ["aaaaaa", "bbbbbb"]


def test_split_message_hard_cut():
    assert split_message("x" * 25, limit=10) == ["x" * 10, "x" * 10, "x" * 5]


def test_telegram_requires_token():
    with pytest.raises(TransportError):
        TelegramTransport(TelegramConfig(token=None))


def test_malformed_update_is_skipped_and_polling_continues():
    transport = TelegramTransport(TelegramConfig(token="123:abc"))
    batches = [[
        {"update_id": 5, "message": {"chat": {"id": 77}, "document": {"mime_type": "application/pdf"}}},
        {"update_id": 6, "message": {"chat": {"id": 77}, "document": {"file_id": "f", "file_size": "big"}}},
        {"update_id": 7, "message": {"chat": {"id": 77}, "text": "Dana"}},
    ]]

    async def fake_call(method, payload=None, timeout=30):
        if not batches:
            transport._closed = True
            return []
        return batches.pop(0)

    transport._call = fake_call

    async def main():
        return [event async for event in transport.events()]

    events = run(main())
    assert events == [TextEvent(conversation_id="77", text="Dana")]
    assert transport._offset == 8


# ========================
# Console
# ========================

def test_console_parses_commands_and_text():
    assert parse_line("/plan") == CommandEvent(conversation_id="console", name="plan")
    assert parse_line("  Dana ") == TextEvent(conversation_id="console", text="Dana")
    assert parse_line("   ") is None


def test_console_pdf_path_becomes_document(tmp_path):
    pdf = tmp_path / "cv.pdf"
    pdf.write_bytes(b"%PDF-1.4")

    event = parse_line(str(pdf))

    assert isinstance(event, DocumentEvent)
    assert event.mime_type == "application/pdf"
    assert event.file_size == 8


def test_console_absolute_pdf_path_is_not_a_command(tmp_path):
    pdf = tmp_path / "resume.PDF"
    pdf.write_bytes(b"%PDF-1.7")

    assert str(pdf).startswith("/")
    assert isinstance(parse_line(str(pdf)), DocumentEvent)
    assert isinstance(parse_line("/resume"), CommandEvent)


def test_console_missing_pdf_is_text():
    assert isinstance(parse_line("missing-cv.pdf"), TextEvent)


def test_console_events_until_eof():
    lines = iter(["/start", "Dana"])

    def read_line():
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    transport = ConsoleTransport(read_line=read_line)

    async def main():
        return [event async for event in transport.events()]

    events = run(main())
    assert [type(e) for e in events] == [CommandEvent, TextEvent]


def test_console_reads_files(tmp_path):
    path = tmp_path / "cv.pdf"
    path.write_bytes(b"data")
    transport = ConsoleTransport(read_line=lambda: "")

    assert run(transport.resolve_file_content(str(path))) == b"data"
    with pytest.raises(TransportError):
        run(transport.resolve_file_content(str(tmp_path / "missing.pdf")))
