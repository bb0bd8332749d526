"""Plain text parse outcome formatter.

WHY: When debugging an option table by hand, a short line-per-record
listing is easier to read than JSON.

HOW: One line per record, in parse order:
  --verbose           flag
  --output=out.txt    option with a value
  [positional] a.txt  positional argument
An error renders as a single ``error (<kind>): <message>`` line.

RULES:
- No trailing whitespace on any line
- Output ends with a newline unless there are no records
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Optional

from argscan.core.errors import ParseError
from argscan.core.ir import ParsedArgument
from argscan.formatters.base import BaseFormatter, FormatterOutput


def format_record(arg: ParsedArgument) -> str:
    """Render a single ParsedArgument as one line of text."""
    if arg.is_positional:
        return "[positional] {}".format(arg.value)
    if arg.has_value:
        return "{}={}".format(arg.name, arg.value)
    return arg.name or ""


class PlainTextFormatter(BaseFormatter):
    """Render a parse outcome as human-readable lines."""

    @property
    def name(self) -> str:
        return "Plain text"

    def format(
        self,
        parsed: Optional[List[ParsedArgument]] = None,
        error: Optional[ParseError] = None,
    ) -> FormatterOutput:
        if error is not None:
            content = "error ({}): {}\n".format(error.kind.value, error.message)
        else:
            lines = [format_record(arg) for arg in parsed or []]
            content = "".join(line + "\n" for line in lines)
        return FormatterOutput(content=content, media_type="text/plain")
