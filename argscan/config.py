"""Configuration defaults and .env loading.

WHY: The CLI has a handful of knobs (log level, default output format,
the token-0 placeholder) that users want to set once per machine or per
project rather than on every invocation. Keeping them here, as plain
module-level constants, makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. Each constant reads an
ARGSCAN_* environment variable with a built-in fallback.
resolve_format() checks a formatter key against the registry.

RULES:
- Every default can be overridden via the environment
- The parser core never reads configuration; only the CLI does
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("ARGSCAN_LOG_LEVEL", "WARNING").upper()
DEFAULT_FORMAT = os.getenv("ARGSCAN_DEFAULT_FORMAT", "plain_text")
DEFAULT_PROGRAM_NAME = os.getenv("ARGSCAN_PROGRAM_NAME", "prog")


def resolve_format(name: str) -> str:
    """Return ``name`` if it is a registered formatter key.

    Raises:
        ValueError: If no formatter is registered under ``name``.
    """
    from argscan.formatters import FORMATTERS

    key = name.strip().lower()
    if key not in FORMATTERS:
        raise ValueError(
            "Unknown format '{}'. Available: {}".format(
                name, ", ".join(sorted(FORMATTERS.keys()))
            )
        )
    return key
