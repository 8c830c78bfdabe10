"""Cleanup of generated text before it is shown in chat."""

from __future__ import annotations

import re

MARKUP_PATTERN = re.compile(r"[*_`~]")


def strip_markup(text: str) -> str:
    """Remove markdown control characters (``*``, ``_``, `````, ``~``).

    Every other character, including whitespace and newlines, is kept.
    """
    return MARKUP_PATTERN.sub("", text)
