"""JSON parse report formatter.

WHY: Scripts wrapping a command need the parse result in a form they can
load without re-implementing the parser, including the precise error
kind when parsing fails.

HOW: Converts records (or the error) into the pydantic ParseReport model
and serializes it with ``model_dump_json``.

RULES:
- Output is always a single JSON object with ``ok``, ``arguments``, ``error``
- Media type: "application/json"
"""

from __future__ import annotations

from typing import List, Optional

from argscan.core.errors import ParseError
from argscan.core.ir import ParsedArgument
from argscan.formatters.base import BaseFormatter, FormatterOutput
from argscan.formatters.models import ErrorRecord, ParsedArgumentRecord, ParseReport


class JSONReportFormatter(BaseFormatter):
    """Render a parse outcome as a JSON ParseReport document."""

    @property
    def name(self) -> str:
        return "JSON report"

    def format(
        self,
        parsed: Optional[List[ParsedArgument]] = None,
        error: Optional[ParseError] = None,
    ) -> FormatterOutput:
        if error is not None:
            report = ParseReport(ok=False, error=ErrorRecord.from_error(error))
        else:
            report = ParseReport(
                ok=True,
                arguments=[ParsedArgumentRecord.from_parsed(a) for a in parsed or []],
            )
        return FormatterOutput(
            content=report.model_dump_json(indent=2),
            media_type="application/json",
        )
