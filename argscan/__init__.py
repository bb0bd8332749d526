"""argscan: POSIX/GNU style command line token parser.

WHY: Small tools often need argument parsing with exact, predictable
semantics (combined short flags, inline and separate values, the ``--``
terminator, positional count limits) without the dispatch, help text,
and type coercion layers of a full CLI framework.

HOW: The caller describes recognized options as OptionDefinition
records, bundles them with the raw argument vector into a ParseConfig,
and calls parse(). The result is an ordered list of ParsedArgument
records, or a typed ParseError.

RULES:
- parse() is the single entry point; it never mutates its input
- Values are always raw text; no type coercion, no prefix matching
- Errors are all-or-nothing: no partial result is ever returned
"""

from argscan.core.errors import (
    InvalidConfigurationError,
    MissingValueError,
    ParseError,
    ParseErrorKind,
    TooFewPositionalArgumentsError,
    TooManyPositionalArgumentsError,
    UnrecognizedArgumentError,
)
from argscan.core.ir import OptionDefinition, ParseConfig, ParsedArgument
from argscan.core.parser import parse

__version__ = "0.1.0"

__all__ = [
    "parse",
    "OptionDefinition",
    "ParseConfig",
    "ParsedArgument",
    "ParseError",
    "ParseErrorKind",
    "InvalidConfigurationError",
    "UnrecognizedArgumentError",
    "MissingValueError",
    "TooManyPositionalArgumentsError",
    "TooFewPositionalArgumentsError",
]
