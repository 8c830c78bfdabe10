"""Chat transports for the mentor bot."""

from .base import Transport
from .console import ConsoleTransport
from .telegram import TelegramTransport

__all__ = ["Transport", "ConsoleTransport", "TelegramTransport"]
