"""Abstract base formatter and output container.

WHY: A parse outcome (a list of records, or an error) has to be shown
to people and handed to other programs. This base class gives every
renderer the same interface so the CLI can pick one by name.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput bundles the rendered content
with its MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` receives exactly one of ``parsed`` / ``error``
- Output content is always a string
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from argscan.core.errors import ParseError
from argscan.core.ir import ParsedArgument


@dataclass
class FormatterOutput:
    """Rendered parse outcome.

    Attributes:
        content: The rendered text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all parse outcome renderers.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'JSON report'."""

    @abstractmethod
    def format(
        self,
        parsed: Optional[List[ParsedArgument]] = None,
        error: Optional[ParseError] = None,
    ) -> FormatterOutput:
        """Render a successful parse or a parse error.

        Args:
            parsed: Records returned by parse(), when it succeeded.
            error: The ParseError raised by parse(), when it failed.

        Returns:
            FormatterOutput with the rendered content.
        """
