"""Shared test fixtures for the argscan test suite.

WHY: Most parser, formatter, and CLI tests run against the same small
option table, modelled on a typical compression tool: boolean flags
that combine, value-taking short and long options.

HOW: SAMPLE_OPTIONS is the canonical table; fixtures hand out the table,
a helper that builds a ParseConfig from a token list, and a JSON table
file on disk.

RULES:
- Token lists passed to make_config exclude the program name;
  the helper prepends "prog" as token 0.
"""

import json
import sys
from typing import Any, Dict, List

import pytest

from argscan.core.ir import OptionDefinition, ParseConfig

FLAG_A = OptionDefinition("-a")
FLAG_B = OptionDefinition("-b")
OPT_N = OptionDefinition("-n", takes_value=True)
OPT_VERBOSE = OptionDefinition("--verbose")
OPT_OUTPUT = OptionDefinition("--output", takes_value=True)
OPT_FOO = OptionDefinition("--foo")

SAMPLE_OPTIONS = (FLAG_A, FLAG_B, OPT_N, OPT_VERBOSE, OPT_OUTPUT, OPT_FOO)

SAMPLE_TABLE_DOC: Dict[str, Any] = {
    "options": [
        {"name": "-a"},
        {"name": "-b"},
        {"name": "-n", "takes_value": True},
        {"name": "--verbose"},
        {"name": "--output", "takes_value": True},
        {"name": "--foo", "takes_value": False},
    ],
    "min_positional": 0,
    "max_positional": 2,
}


def build_config(
    tokens: List[str],
    options=SAMPLE_OPTIONS,
    min_positional: int = 0,
    max_positional: int = sys.maxsize,
) -> ParseConfig:
    return ParseConfig(
        tokens=["prog"] + list(tokens),
        options=options,
        min_positional=min_positional,
        max_positional=max_positional,
    )


@pytest.fixture
def make_config():
    """Factory building a ParseConfig over SAMPLE_OPTIONS by default."""
    return build_config


@pytest.fixture
def sample_table_path(tmp_path):
    """SAMPLE_TABLE_DOC written to a JSON file."""
    path = tmp_path / "options.json"
    path.write_text(json.dumps(SAMPLE_TABLE_DOC), encoding="utf-8")
    return path
