"""Document building facade.

Responsibilities:
- Normalize raw comment text before handing it to an injected parser.
- Short-circuit blank input to the empty `Document` sentinel.
- Keep parse failures as structured results, and report them with full
  context before they propagate to callers of `build`.

Key types:
- `BuildResult`: document or parse error for one build attempt.
- `DocumentBuilder`: normalizer + parser composition.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..errors import MarkupParseError
from ..telemetry.logger import log_parse_failure
from ..text.normalizer import CommentNormalizer
from .document import Document
from .formatter import DocumentFormatter
from .parser import MarkupParser

_NEWLINES_ONLY_RE = re.compile(r"\n*")


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of one document build attempt.

    Attributes:
        text: Normalized text that was handed to the parser.
        document: Parsed document on success.
        error: Parser failure, when parsing did not succeed.
    """

    text: str
    document: Document | None = None
    error: MarkupParseError | None = None

    @property
    def ok(self) -> bool:
        """Return whether the build produced a document."""

        return self.error is None


class DocumentBuilder:
    """Normalize comment text and build a `Document` with an injected parser."""

    def __init__(
        self,
        parser: MarkupParser,
        normalizer: CommentNormalizer | None = None,
    ) -> None:
        """Initialize with a parser and an optional custom normalizer."""

        self.parser = parser
        self.normalizer = normalizer or CommentNormalizer()

    def parse(self, value: str | Document) -> BuildResult:
        """Build a document without reporting failures.

        Documents pass through untouched. Text that normalizes to nothing but
        newlines yields an empty `Document` without calling the parser.
        """

        if isinstance(value, Document):
            return BuildResult(text="", document=value)

        text = self.normalizer.normalize(value)
        if _NEWLINES_ONLY_RE.fullmatch(text):
            return BuildResult(text=text, document=Document())

        try:
            document = self.parser.parse(text)
        except MarkupParseError as exc:
            return BuildResult(text=text, error=exc)
        return BuildResult(text=text, document=document)

    def build(self, value: str | Document) -> Document:
        """Build a document, logging the full failure context before re-raising.

        Raises:
            MarkupParseError: The parser's own error, after the diagnostic dump.
        """

        result = self.parse(value)
        if result.document is not None:
            return result.document

        error = result.error or MarkupParseError("parser returned no document")
        log_parse_failure(error, result.text)
        raise error


def markup(
    text: str | Document,
    parser: MarkupParser,
    formatter: DocumentFormatter,
) -> str:
    """Build a document from `text` and render it with `formatter`."""

    document = DocumentBuilder(parser).build(text)
    return formatter.format(document)
