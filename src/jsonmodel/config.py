"""Settings for the jsonmodel shell, read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

INDENT_ENV = "JSONMODEL_INDENT"
LOG_LEVEL_ENV = "JSONMODEL_LOG_LEVEL"
PROMPT_ENV = "JSONMODEL_PROMPT"


@dataclass(frozen=True)
class Settings:
    indent_factor: int = 2
    log_level: str = "WARNING"
    prompt: str = "JSON> "


def env_text(environ: Mapping[str, str], name: str, *, default: str = "") -> str:
    return environ.get(name, default).strip()


def _indent_from(raw: str, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", INDENT_ENV, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", INDENT_ENV, raw)
        return default
    return value


def _level_from(raw: str, default: str) -> str:
    if not raw:
        return default
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r: unknown log level", LOG_LEVEL_ENV, raw)
        return default
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from *environ* (default: ``os.environ``).

    Invalid values are reported and replaced by the defaults.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        indent_factor=_indent_from(env_text(env, INDENT_ENV), defaults.indent_factor),
        log_level=_level_from(env_text(env, LOG_LEVEL_ENV), defaults.log_level),
        prompt=env.get(PROMPT_ENV) or defaults.prompt,
    )
