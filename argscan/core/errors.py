"""Typed exceptions raised by the token parser.

WHY: Callers need to tell a broken option table apart from bad user
input, and bad user input apart by cause (unknown option, missing value,
wrong number of positionals) so they can print the right message or pick
the right exit code.

HOW: ParseError is the common base and carries a ParseErrorKind, a
human-readable message, and, where one exists, the offending token and
its index in the token vector. One subclass per kind lets callers catch
exactly what they care about.

RULES:
- Every error is terminal for the parse() call that raised it
- token/token_index are None when no single token is to blame
  (min > max, too few positionals at end of input)
- InvalidConfigurationError is also a ValueError: it describes a
  programming error in the caller's table, not bad user input
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    """Closed set of parse failure causes."""

    invalid_configuration = "invalid_configuration"
    unrecognized_argument = "unrecognized_argument"
    missing_value = "missing_value"
    too_many_positional_arguments = "too_many_positional_arguments"
    too_few_positional_arguments = "too_few_positional_arguments"


class ParseError(Exception):
    """Base class for every failure reported by parse().

    RULES:
    - Always include kind and message
    - token is the full token text, never a slice of it
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        token_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.token = token
        self.token_index = token_index
        super().__init__(message)


class InvalidConfigurationError(ParseError, ValueError):
    """Raised when the ParseConfig itself is unusable.

    Triggered by min_positional > max_positional, or by an option name
    that is not ``-X`` or ``--something``. Detected before any token is
    scanned.
    """

    kind = ParseErrorKind.invalid_configuration


class UnrecognizedArgumentError(ParseError):
    """Raised when a ``--name`` token or a ``-x`` character has no definition."""

    kind = ParseErrorKind.unrecognized_argument


class MissingValueError(ParseError):
    """Raised when a value-taking option is the last token."""

    kind = ParseErrorKind.missing_value


class TooManyPositionalArgumentsError(ParseError):
    kind = ParseErrorKind.too_many_positional_arguments


class TooFewPositionalArgumentsError(ParseError):
    kind = ParseErrorKind.too_few_positional_arguments
