"""
=============================================================================
MESSAGE CONFIGURATION
=============================================================================

Settings for the JSON body codec and for the package's logging.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    Priority (highest to lowest):

    1. Explicit MessageConfig(...) passed to Request / Response
    2. Environment variables via MessageConfig.from_env()
       └── HTTPMESSAGE_JSON_INDENT=2 python app.py
    3. Default values (in this dataclass, also DEFAULT_CONFIG)

The library never reads the environment on its own; callers opt in with
from_env().

=============================================================================
"""

import logging
import os
from dataclasses import dataclass


_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class MessageConfig:
    """
    Configuration shared by HttpMessage, Request and Response.

    Immutable; one instance may be shared by many messages.
    """

    # ─────────────────────────────────────────────────────────────────────
    # JSON CODEC
    # ─────────────────────────────────────────────────────────────────────

    json_indent: int = 4
    """
    Spaces of indentation used by set_json(). Bodies are always
    pretty-printed; 0 still puts one value per line.
    """

    json_ensure_ascii: bool = False
    """
    Escape non-ASCII characters as \\uXXXX. Off by default: bodies are
    UTF-8, so characters like "é" are written as-is.
    """

    json_sort_keys: bool = False
    """Sort object keys when encoding. Useful for reproducible bodies."""

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"
    """
    Level applied to the "httpmessage" logger by setup_logging().
    DEBUG shows tolerated target parse failures and JSON decode errors.
    """

    @classmethod
    def from_env(cls) -> "MessageConfig":
        """
        Create configuration from environment variables.

        HTTPMESSAGE_JSON_INDENT        Indent for set_json() (default: 4)
        HTTPMESSAGE_JSON_ENSURE_ASCII  Escape non-ASCII (default: false)
        HTTPMESSAGE_JSON_SORT_KEYS     Sort object keys (default: false)
        HTTPMESSAGE_LOG_LEVEL          Logging level (default: WARNING)

        Raises:
            ValueError: If a value is malformed or fails validate().
        """
        config = cls(
            json_indent=int(os.getenv("HTTPMESSAGE_JSON_INDENT", "4")),
            json_ensure_ascii=_env_bool("HTTPMESSAGE_JSON_ENSURE_ASCII", False),
            json_sort_keys=_env_bool("HTTPMESSAGE_JSON_SORT_KEYS", False),
            log_level=os.getenv("HTTPMESSAGE_LOG_LEVEL", "WARNING"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Validate configuration values, failing fast on bad ones."""
        if self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0, got {self.json_indent}")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")

    def setup_logging(self) -> None:
        """Configure logging for applications that have not done so."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        logging.getLogger("httpmessage").setLevel(level)


DEFAULT_CONFIG = MessageConfig()
