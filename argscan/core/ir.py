"""Record types for option tables, parse configs, and parse results.

WHY: The scanner, the table loader, and the formatters all talk about
the same three things: which options exist, what to parse, and what
came out. Plain frozen dataclasses give every layer one shared,
immutable vocabulary.

HOW: Three dataclasses form the contract:
  OptionDefinition: one recognized option ("-n" or "--output")
  ParseConfig: token vector + option table + positional bounds
  ParsedArgument: one parsed option occurrence or positional token

RULES:
- All records are frozen; nothing is mutated after construction
- ParseConfig stores tokens and options as tuples
- ParseConfig does NOT validate itself; parse() does, so an invalid
  config is still constructible and reported as InvalidConfiguration
- ParsedArgument.value is a copy of the token text (Python strings are
  immutable, so there is no lifetime tie to the input vector)
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class OptionDefinition:
    """A single option the parser recognizes.

    Attributes:
        name: Full option name including dashes, e.g. ``"-n"`` or
              ``"--output"``. Single-dash names are exactly one
              character after the dash.
        takes_value: True if the option consumes a value (inline for
                     short options, or the following token).
    """

    name: str
    takes_value: bool = False


@dataclass(frozen=True)
class ParseConfig:
    """Everything one parse() call needs.

    WHY: Bundling the token vector with the option table and the
    positional bounds keeps parse() a single-argument, side-effect-free
    call that can be repeated on the same input with identical results.

    RULES:
    - tokens[0] is the program name and is never parsed
    - options are searched in order; the first match wins
    - min_positional <= max_positional is checked by parse(), not here
    """

    tokens: Tuple[str, ...]
    options: Tuple[OptionDefinition, ...] = ()
    min_positional: int = 0
    max_positional: int = sys.maxsize

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "options", tuple(self.options))


@dataclass(frozen=True)
class ParsedArgument:
    """One parsed option occurrence or positional token.

    Attributes:
        definition: The matched OptionDefinition, or None for a
                    positional argument.
        has_value: True if ``value`` holds text. Always True for
                   positionals.
        value: The option value or positional text, None when the
               option takes no value.
        token_index: Index in ``ParseConfig.tokens`` of the token this
                     record was produced from.
    """

    definition: Optional[OptionDefinition]
    has_value: bool = False
    value: Optional[str] = None
    token_index: int = field(default=0, compare=False)

    @property
    def is_positional(self) -> bool:
        return self.definition is None

    @property
    def name(self) -> Optional[str]:
        """Matched option name, or None for positionals."""
        if self.definition is None:
            return None
        return self.definition.name
