"""Tests for markup stripping of generated text."""

from careermentor.formatter import strip_markup


def test_removes_all_control_characters():
    assert strip_markup("**Bold** _it_ `code` ~~gone~~") == "Bold it code gone"


def test_keeps_whitespace_and_newlines():
    text = "Line one\n\n  * item\n\tTabbed_"
    assert strip_markup(text) == "Line one\n\n   item\n\tTabbed"


def test_plain_text_unchanged():
    text = "Day 1: Review SQL joins (inner, outer) - 2h.\nDay 2: #system-design!"
    assert strip_markup(text) == text


def test_idempotent():
    text = "*a* _b_ `c` ~d~ **e**"
    once = strip_markup(text)
    assert strip_markup(once) == once


def test_empty_string():
    assert strip_markup("") == ""
