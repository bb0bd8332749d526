"""Parse outcome formatter registry.

WHY: The CLI needs a single lookup to find the right renderer by name.
A central dict makes adding a format trivial: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used by --format and ARGSCAN_DEFAULT_FORMAT)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from argscan.formatters.json_report import JSONReportFormatter
from argscan.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from argscan.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json": JSONReportFormatter,
    "plain_text": PlainTextFormatter,
}
