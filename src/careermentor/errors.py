"""Error taxonomy for the career mentor bot.

Generation and extraction errors are caught at the orchestration boundary
and turned into outcome values; they never reach the user as raw text.
"""

from __future__ import annotations


class MentorError(Exception):
    """Base class for all career mentor errors."""


class GenerationError(MentorError):
    """The text-generation service failed (network, quota, bad response)."""


class ExtractionError(MentorError):
    """A document could not be turned into plain text."""


class InputValidationError(MentorError):
    """User input does not meet a precondition (e.g. non-PDF upload)."""


class ConfigError(MentorError):
    """Configuration is missing or malformed."""


class TransportError(MentorError):
    """The chat transport failed to deliver or fetch something."""
