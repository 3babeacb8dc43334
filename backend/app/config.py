"""Environment-driven settings for the Melting Snowman API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from models.game import DEFAULT_MAX_GUESSES, DEFAULT_WORD

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    pass


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    word: str = DEFAULT_WORD
    max_guesses: int = DEFAULT_MAX_GUESSES
    allowed_origins: tuple[str, ...] = ("*",)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from the environment (or any mapping, for tests).

        Variables: SNOWMAN_WORD, SNOWMAN_MAX_GUESSES, ALLOWED_ORIGINS (comma separated),
        HOST, PORT, LOG_LEVEL. Missing or blank values fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        word = env.get("SNOWMAN_WORD", "").strip() or DEFAULT_WORD
        max_guesses = _read_int(env, "SNOWMAN_MAX_GUESSES", DEFAULT_MAX_GUESSES)
        if max_guesses < 1:
            raise ConfigError(f"SNOWMAN_MAX_GUESSES must be at least 1, got {max_guesses}")

        origins = tuple(
            o.strip() for o in env.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()
        ) or ("*",)

        port = _read_int(env, "PORT", 8000)
        if not 1 <= port <= 65535:
            raise ConfigError(f"PORT must be between 1 and 65535, got {port}")

        log_level = (env.get("LOG_LEVEL", "").strip() or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            word=word,
            max_guesses=max_guesses,
            allowed_origins=origins,
            host=env.get("HOST", "").strip() or "127.0.0.1",
            port=port,
            log_level=log_level,
        )
