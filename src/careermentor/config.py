"""Configuration management for the career mentor bot.

Values come from environment variables (a local ``.env`` file is loaded
first) and fall back to the defaults declared on the dataclasses below.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError


@dataclass
class GenerationConfig:
    """Settings for the Gemini generation gateway."""
    api_key: Optional[str] = None
    model: str = "gemini-1.5-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: int = 60
    temperature: Optional[float] = None


@dataclass
class TelegramConfig:
    """Settings for the Telegram Bot API transport."""
    token: Optional[str] = None
    api_url: str = "https://api.telegram.org"
    poll_timeout: int = 30


@dataclass
class MentorConfig:
    """Behavioural limits of the mentor flow."""
    follow_up_limit: int = 1
    resume_char_limit: int = 20000
    resume_max_bytes: int = 5 * 1024 * 1024


@dataclass
class Config:
    """Main configuration object."""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    mentor: MentorConfig = field(default_factory=MentorConfig)
    log_level: str = "INFO"

    def validate(self, transport: str = "telegram") -> None:
        """Check that the credentials needed for ``transport`` are present.

        Raises:
            ConfigError: If a required credential is missing.
        """
        missing = []
        if not self.generation.api_key:
            missing.append("GEMINI_API_KEY")
        if transport == "telegram" and not self.telegram.token:
            missing.append("TELEGRAM_BOT_TOKEN")
        if missing:
            raise ConfigError(f"Missing {' or '.join(missing)} in environment or .env")


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")


def _float_setting(env: Mapping[str, str], key: str) -> Optional[float]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}")


def load_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """Load configuration with defaults.

    Args:
        env: Mapping to read settings from. Defaults to ``os.environ`` after
            loading a ``.env`` file if one exists.

    Returns:
        Config object populated from the environment.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    generation = GenerationConfig(
        api_key=env.get("GEMINI_API_KEY") or None,
        model=env.get("GEMINI_MODEL") or GenerationConfig.model,
        timeout=_int_setting(env, "GEMINI_TIMEOUT", GenerationConfig.timeout),
        temperature=_float_setting(env, "GEMINI_TEMPERATURE"),
    )
    telegram = TelegramConfig(
        token=env.get("TELEGRAM_BOT_TOKEN") or None,
        poll_timeout=_int_setting(env, "TELEGRAM_POLL_TIMEOUT", TelegramConfig.poll_timeout),
    )
    mentor = MentorConfig(
        follow_up_limit=_int_setting(env, "MENTOR_FOLLOW_UP_LIMIT", MentorConfig.follow_up_limit),
        resume_char_limit=_int_setting(env, "MENTOR_RESUME_CHAR_LIMIT", MentorConfig.resume_char_limit),
    )

    return Config(
        generation=generation,
        telegram=telegram,
        mentor=mentor,
        log_level=(env.get("MENTOR_LOG_LEVEL") or "INFO").upper(),
    )
