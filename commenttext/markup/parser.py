"""Markup parser contract and the paragraph-level reference parser.

Responsibilities:
- Define the `MarkupParser` protocol consumed by `DocumentBuilder`.
- Split normalized text into paragraphs without interpreting block markup.
"""

from __future__ import annotations

import re
from typing import Protocol

from ..errors import MarkupParseError
from .document import Document, Paragraph

_PARAGRAPH_BREAK_RE = re.compile(r"\n[^\S\n]*\n\s*")


class MarkupParser(Protocol):
    """Protocol for parsers turning normalized text into a `Document`."""

    def parse(self, text: str) -> Document:
        """Parse normalized text, raising `MarkupParseError` on failure."""


class ParagraphParser:
    """Parse normalized text into blank-line separated paragraphs."""

    def parse(self, text: str) -> Document:
        """Return one `Paragraph` per blank-line separated block of `text`.

        Raises:
            MarkupParseError: If `text` contains a NUL character.
        """

        self._reject_nul(text)
        paragraphs = [
            Paragraph(text=" ".join(line.strip() for line in block.split("\n") if line.strip()))
            for block in _PARAGRAPH_BREAK_RE.split(text)
            if block.strip()
        ]
        return Document(parts=tuple(paragraphs))

    def _reject_nul(self, text: str) -> None:
        """Raise a located parse error for the first NUL character."""

        offset = text.find("\x00")
        if offset == -1:
            return
        line_number = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        raise MarkupParseError(
            "NUL character in comment text",
            error_type="invalid_character",
            trace=(f"line {line_number}, column {column}",),
        )
