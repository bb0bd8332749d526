"""Pydantic models for machine-readable parse reports.

WHY: Other programs consume the JSON report (shell wrappers, test
harnesses). Pydantic models pin the report shape down in one place,
serialize it consistently, and publish a JSON Schema for free.

HOW: ParseReport is the top-level document. On success it holds one
ParsedArgumentRecord per parsed record; on failure it holds an
ErrorRecord and an empty argument list.

RULES:
- All models use Field(description=...) so the schema is self-documenting
- ``ok`` is True iff ``error`` is None
- Record order matches parse() output order
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from argscan.core.errors import ParseError, ParseErrorKind
from argscan.core.ir import ParsedArgument


class ParsedArgumentRecord(BaseModel):
    """One parsed option occurrence or positional token."""

    name: Optional[str] = Field(
        default=None,
        description="Matched option name, or null for a positional argument.",
    )
    positional: bool = Field(description="True for positional arguments.")
    has_value: bool = Field(description="True if value holds text.")
    value: Optional[str] = Field(default=None, description="Option value or positional text.")
    token_index: int = Field(description="Index of the source token in the argument vector.")

    @classmethod
    def from_parsed(cls, arg: ParsedArgument) -> "ParsedArgumentRecord":
        return cls(
            name=arg.name,
            positional=arg.is_positional,
            has_value=arg.has_value,
            value=arg.value,
            token_index=arg.token_index,
        )


class ErrorRecord(BaseModel):
    """Why parsing failed."""

    kind: ParseErrorKind = Field(description="Error category.")
    message: str = Field(description="Human-readable error message.")
    token: Optional[str] = Field(default=None, description="Offending token, if any.")
    token_index: Optional[int] = Field(
        default=None, description="Index of the offending token, if any."
    )

    @classmethod
    def from_error(cls, error: ParseError) -> "ErrorRecord":
        return cls(
            kind=error.kind,
            message=error.message,
            token=error.token,
            token_index=error.token_index,
        )


class ParseReport(BaseModel):
    """Complete outcome of one parse() call."""

    ok: bool = Field(description="True if parsing succeeded.")
    arguments: List[ParsedArgumentRecord] = Field(
        default_factory=list, description="Parsed records in token order."
    )
    error: Optional[ErrorRecord] = Field(default=None, description="Failure details, if any.")
