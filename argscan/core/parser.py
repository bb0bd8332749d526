"""Single-pass token scanner: argument vector in, parsed records out.

WHY: Every command line front end has to answer the same question for
each token: is this a long option, a cluster of short options, an
option value, or a positional argument? Getting the POSIX/GNU edge
cases right (``-abc`` clusters, ``-n1000`` vs ``-n 1000``, the ``--``
terminator, positional bounds) is the hard part, so it lives here once.

HOW: parse() validates the config, then walks tokens[1:] left to right
with one flag (``accept_dash_tokens``) and one counter (positionals
seen). Each token is classified in this order:
  1. ``--`` exactly            → stop interpreting dashes, emit nothing
  2. ``--name``                → long option, exact table match
  3. ``-xyz``                  → short option cluster, char by char
  4. anything else             → positional
Short clusters are scanned by _scan_short_cluster(), which returns the
index of the next token to look at (so a consumed value token is skipped).

RULES:
- tokens[0] (program name) is always skipped
- Option lookup is first match in table order, never prefix matching
- A bare ``-`` is positional
- A value taken from the following token is never re-examined
- A value-taking short option ends its cluster: the rest of the token
  (if any) is its value
- Any error raises; the partially built list is dropped with the frame,
  so callers never see a partial result
- No logging, no I/O, no module-level state
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from argscan.core.errors import (
    InvalidConfigurationError,
    MissingValueError,
    TooFewPositionalArgumentsError,
    TooManyPositionalArgumentsError,
    UnrecognizedArgumentError,
)
from argscan.core.ir import OptionDefinition, ParseConfig, ParsedArgument

TERMINATOR = "--"


def is_valid_option_name(name: object) -> bool:
    """True if ``name`` is ``-X`` (one char) or ``--something``.

    ``--`` on its own passes; it can never match a long option token
    because that exact token is the terminator.
    """
    if not isinstance(name, str) or len(name) < 2 or name[0] != "-":
        return False
    if name[1] != "-" and len(name) != 2:
        return False
    return True


def validate_config(config: ParseConfig) -> None:
    """Raise InvalidConfigurationError if ``config`` cannot be parsed with.

    Checks positional bounds first, then every option name in table
    order. Runs before any token is looked at.
    """
    if config.min_positional > config.max_positional:
        raise InvalidConfigurationError(
            "min_positional ({}) exceeds max_positional ({})".format(
                config.min_positional, config.max_positional
            )
        )

    for definition in config.options:
        if not is_valid_option_name(definition.name):
            raise InvalidConfigurationError(
                "Invalid option name {!r}: expected '-X' or '--name'".format(
                    definition.name
                ),
                token=definition.name,
            )


def _find_long(
    options: Sequence[OptionDefinition], token: str
) -> Optional[OptionDefinition]:
    for definition in options:
        if definition.name == token:
            return definition
    return None


def _find_short(
    options: Sequence[OptionDefinition], char: str
) -> Optional[OptionDefinition]:
    for definition in options:
        name = definition.name
        if len(name) == 2 and name[0] == "-" and name[1] == char:
            return definition
    return None


def _take_next_token(
    tokens: Sequence[str], index: int, option_name: str
) -> str:
    """Return tokens[index + 1] as the value of the option at ``index``."""
    if index == len(tokens) - 1:
        raise MissingValueError(
            "Option '{}' requires a value".format(option_name),
            token=tokens[index],
            token_index=index,
        )
    return tokens[index + 1]


def _scan_short_cluster(
    config: ParseConfig, index: int, parsed: List[ParsedArgument]
) -> int:
    """Parse the short option cluster at ``tokens[index]``.

    WHY: ``-abc`` means ``-a -b -c``, but ``-n1000`` means ``-n`` with
    value ``1000``. Which one applies is only known char by char, once
    each character has been looked up.

    HOW: Walk the characters after the dash. Flags are appended and the
    walk continues. The first value-taking option ends the walk: the
    remaining characters are its value, or, if none remain, the next
    token is.

    Returns:
        Index of the next token to examine (``index + 2`` when the
        following token was consumed as a value, else ``index + 1``).
    """
    tokens = config.tokens
    token = tokens[index]

    for pos in range(1, len(token)):
        char = token[pos]
        definition = _find_short(config.options, char)
        if definition is None:
            raise UnrecognizedArgumentError(
                "Unrecognized option '-{}' in '{}'".format(char, token),
                token=token,
                token_index=index,
            )

        if not definition.takes_value:
            parsed.append(ParsedArgument(definition, token_index=index))
            continue

        rest = token[pos + 1:]
        if rest:
            parsed.append(ParsedArgument(definition, True, rest, index))
            return index + 1

        value = _take_next_token(tokens, index, definition.name)
        parsed.append(ParsedArgument(definition, True, value, index))
        return index + 2

    return index + 1


def parse(config: ParseConfig) -> List[ParsedArgument]:
    """Parse ``config.tokens`` against ``config.options``.

    WHY: This is the single public entry point of the parser. Front ends
    hand it the raw argument vector and get back an ordered list of
    records they can dispatch on.

    HOW: Validate the config, then run the single left-to-right pass
    described in the module docstring. After the pass, enforce the
    positional minimum.

    Args:
        config: Token vector, option table, and positional bounds.

    Returns:
        List of ParsedArgument in token order. Positionals have
        ``definition=None`` and ``has_value=True``.

    Raises:
        InvalidConfigurationError: min > max, or a malformed option name.
        UnrecognizedArgumentError: ``--name`` or ``-x`` not in the table.
        MissingValueError: value-taking option with no token after it.
        TooManyPositionalArgumentsError: more than max_positional.
        TooFewPositionalArgumentsError: fewer than min_positional.
    """
    validate_config(config)

    tokens = config.tokens
    parsed: List[ParsedArgument] = []
    accept_dash_tokens = True
    positional_count = 0

    i = 1
    while i < len(tokens):
        token = tokens[i]

        if accept_dash_tokens and token.startswith("--"):
            if token == TERMINATOR:
                accept_dash_tokens = False
                i += 1
                continue

            definition = _find_long(config.options, token)
            if definition is None:
                raise UnrecognizedArgumentError(
                    "Unrecognized option '{}'".format(token),
                    token=token,
                    token_index=i,
                )

            if definition.takes_value:
                value = _take_next_token(tokens, i, definition.name)
                parsed.append(ParsedArgument(definition, True, value, i))
                i += 2
            else:
                parsed.append(ParsedArgument(definition, token_index=i))
                i += 1
            continue

        if accept_dash_tokens and len(token) > 1 and token[0] == "-":
            i = _scan_short_cluster(config, i, parsed)
            continue

        positional_count += 1
        if positional_count > config.max_positional:
            raise TooManyPositionalArgumentsError(
                "Too many positional arguments (at most {} allowed)".format(
                    config.max_positional
                ),
                token=token,
                token_index=i,
            )
        parsed.append(ParsedArgument(None, True, token, i))
        i += 1

    if positional_count < config.min_positional:
        raise TooFewPositionalArgumentsError(
            "Too few positional arguments: got {}, need at least {}".format(
                positional_count, config.min_positional
            )
        )

    return parsed
