"""CLI entry point for the AI Career Mentor bot.

Usage:
    # Run the Telegram bot (needs TELEGRAM_BOT_TOKEN and GEMINI_API_KEY)
    careermentor

    # Chat with the mentor in the terminal
    careermentor --transport console

    # Pick a different Gemini model
    careermentor --model gemini-1.5-pro --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from .config import Config, load_config
from .dispatcher import Dispatcher
from .errors import ConfigError
from .llm_client_gemini import GeminiLLMClient
from .orchestration import MentorOrchestrator
from .transport import ConsoleTransport, TelegramTransport
from .transport.base import Transport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="careermentor",
        description="Interview preparation chat bot backed by Gemini",
    )
    parser.add_argument(
        "--transport", "-t",
        choices=["telegram", "console"],
        default="telegram",
        help="Where to chat: Telegram long polling or the local terminal",
    )
    parser.add_argument(
        "--model", "-m",
        default=None,
        help="Gemini model name (default: GEMINI_MODEL or gemini-1.5-flash)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MENTOR_LOG_LEVEL or INFO)",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def create_transport(name: str, config: Config) -> Transport:
    if name == "console":
        return ConsoleTransport()
    return TelegramTransport(config.telegram)


async def run_bot(config: Config, transport_name: str) -> None:
    llm_client = GeminiLLMClient(config.generation)
    transport = create_transport(transport_name, config)
    orchestrator = MentorOrchestrator(llm_client, config=config.mentor)
    dispatcher = Dispatcher(transport, orchestrator)

    logger.info("AI Career Mentor is running (%s, model %s)", transport_name, config.generation.model)
    try:
        await dispatcher.run()
    finally:
        await transport.close()
        await llm_client.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        if args.model:
            config.generation.model = args.model
        if args.log_level:
            config.log_level = args.log_level.upper()
        configure_logging(config.log_level)
        config.validate(args.transport)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        asyncio.run(run_bot(config, args.transport))
    except KeyboardInterrupt:
        print("\nExiting.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
