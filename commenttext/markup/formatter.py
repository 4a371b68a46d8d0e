"""Formatter contract and the paragraph HTML formatter."""

from __future__ import annotations

from typing import Protocol

from ..text.typography import to_html
from .document import Document


class DocumentFormatter(Protocol):
    """Protocol for formatters rendering a `Document`."""

    def format(self, document: Document) -> str:
        """Render `document` into output text."""


class HtmlFormatter:
    """Render paragraphs as `<p>` elements.

    Only leaf paragraph text goes through the typographic scanner; the
    surrounding markup is emitted as-is.
    """

    def __init__(self, typography: bool = True) -> None:
        """Initialize with optional typographic substitution of leaf text."""

        self.typography = typography

    def format(self, document: Document) -> str:
        """Render `document` as newline-separated HTML paragraphs."""

        return "\n".join(f"<p>{self._convert(part.text)}</p>" for part in document.parts)

    def _convert(self, text: str) -> str:
        return to_html(text) if self.typography else text
