"""Centralized defaults for filekit helpers.

Defines immutable defaults for copy buffer sizes, status codes and file-name
validation so every helper behaves the same way across environments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the package."""

    # Status codes
    CODE_SUCCESS: int = 0

    # Stream copying
    DEFAULT_BUFFER_SIZE: int = 8 * 1024

    # Characters that must not appear in a file name
    INVALID_FILE_NAME_CHARS: tuple[str, ...] = (
        # windows
        '"', "*", "<", ">", "?", "|",
        # unix
        "\0", ":",
    )

    # Text helpers
    DEFAULT_ENCODING: str = "utf-8"


# Convenience re-exports
CODE_SUCCESS: int = Config.CODE_SUCCESS
DEFAULT_BUFFER_SIZE: int = Config.DEFAULT_BUFFER_SIZE


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
