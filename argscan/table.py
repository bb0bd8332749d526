"""Load option tables from JSON files.

WHY: Hard-coding option tables in Python is fine for libraries, but the
CLI (and tests, and other tools) need to describe a table as data. A
small JSON document with a published schema gives a clear, checkable
format.

HOW: load_option_table() reads the file, validates it against
OPTION_TABLE_SCHEMA with jsonschema, and builds an OptionTable holding
OptionDefinition records and positional bounds. OptionTable.to_config()
binds a token vector to produce a ParseConfig.

RULES:
- The schema checks structure only; option name shape is checked by
  parse() so a table file and a hand-built table fail the same way
- Missing takes_value means a flag (no value)
- Missing bounds mean 0 and unbounded
- All loading failures raise OptionTableError with the path in the message
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

import jsonschema

from argscan.core.ir import OptionDefinition, ParseConfig

logger = logging.getLogger(__name__)

OPTION_TABLE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "argscan option table",
    "type": "object",
    "required": ["options"],
    "additionalProperties": False,
    "properties": {
        "options": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string"},
                    "takes_value": {"type": "boolean"},
                },
            },
        },
        "min_positional": {"type": "integer", "minimum": 0},
        "max_positional": {"type": "integer", "minimum": 0},
    },
}


class OptionTableError(ValueError):
    """Raised when an option table file cannot be read or is malformed."""


@dataclass(frozen=True)
class OptionTable:
    """An option table plus positional bounds, not yet bound to tokens."""

    options: Tuple[OptionDefinition, ...]
    min_positional: int = 0
    max_positional: int = sys.maxsize

    def to_config(self, tokens: Sequence[str]) -> ParseConfig:
        return ParseConfig(
            tokens=tokens,
            options=self.options,
            min_positional=self.min_positional,
            max_positional=self.max_positional,
        )


def option_table_from_dict(data: Any) -> OptionTable:
    """Validate an already-decoded table document and build an OptionTable.

    Raises:
        jsonschema.ValidationError: If ``data`` does not match the schema.
    """
    jsonschema.validate(instance=data, schema=OPTION_TABLE_SCHEMA)

    options = tuple(
        OptionDefinition(
            name=entry["name"],
            takes_value=entry.get("takes_value", False),
        )
        for entry in data["options"]
    )
    return OptionTable(
        options=options,
        min_positional=data.get("min_positional", 0),
        max_positional=data.get("max_positional", sys.maxsize),
    )


def load_option_table(path: str | Path) -> OptionTable:
    """Read and validate an option table JSON file.

    Args:
        path: Path to a UTF-8 JSON file matching OPTION_TABLE_SCHEMA.

    Returns:
        The decoded OptionTable.

    Raises:
        OptionTableError: If the file is missing, is not valid JSON, or
            does not match the schema.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OptionTableError("Cannot read option table {}: {}".format(path, exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise OptionTableError("Option table {} is not valid JSON: {}".format(path, exc)) from exc

    try:
        table = option_table_from_dict(data)
    except jsonschema.ValidationError as exc:
        raise OptionTableError(
            "Option table {} does not match the schema: {}".format(path, exc.message)
        ) from exc

    logger.debug("Loaded option table %s (%d options)", path, len(table.options))
    return table
