"""Document tree produced by markup parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Paragraph:
    """One paragraph of leaf text.

    Attributes:
        text: Paragraph text with its lines joined by single spaces.
    """

    text: str


@dataclass(frozen=True, slots=True)
class Document:
    """Structured result of parsing normalized comment text.

    `Document()` with no parts is the sentinel for blank input.
    """

    parts: tuple[Paragraph, ...] = ()

    def is_empty(self) -> bool:
        """Return whether the document carries no parts."""

        return not self.parts
