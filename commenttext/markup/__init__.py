"""Document building and rendering.

This package wires the comment normalizer to injected parsers and
formatters, and ships a paragraph-level reference parser and HTML formatter.
"""

from .builder import BuildResult, DocumentBuilder, markup
from .document import Document, Paragraph
from .formatter import DocumentFormatter, HtmlFormatter
from .parser import MarkupParser, ParagraphParser

__all__ = [
    "BuildResult",
    "DocumentBuilder",
    "markup",
    "Document",
    "Paragraph",
    "DocumentFormatter",
    "HtmlFormatter",
    "MarkupParser",
    "ParagraphParser",
]
