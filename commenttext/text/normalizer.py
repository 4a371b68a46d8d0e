"""Comment text normalization rules.

Responsibilities:
- Strip comment markers (`#` runs or `/* ... */` stars) without shifting columns.
- Expand tabs, flush the common left margin and trim surrounding newlines.
- Keep every rule a pure `str -> str` transform so rules compose in order.

Key public functions:
- `normalize_comment`: run the default hash-style rule sequence.
- `strip_hashes`, `strip_stars`, `expand_tabs`, `flush_left`, `strip_newlines`.
"""

from __future__ import annotations

import re
from typing import Protocol

TAB_WIDTH = 8

_UNMARKED_LINE_RE = re.compile(r"^\s*[^#\s]", re.MULTILINE)
_LEADING_HASHES_RE = re.compile(r"^[^\S\n]*(#+)", re.MULTILINE)
_BLANK_LINE_RE = re.compile(r"^\s+$", re.MULTILINE)
_DOCUMENT_METHOD_RE = re.compile(r"Document-method:\s+[\w:.#]+")
_COMMENT_OPEN_RE = re.compile(r"/\*+")
_COMMENT_CLOSE_RE = re.compile(r"\*+/")
_LEADING_STAR_RE = re.compile(r"^[ \t]*\*", re.MULTILINE)
_NON_WHITESPACE_RE = re.compile(r"\S")


def _blank_out(match: re.Match[str]) -> str:
    """Replace a matched span with the same number of spaces."""

    return " " * len(match.group(0))


def strip_hashes(text: str) -> str:
    """Replace leading `#` markers with spaces, keeping the column of the content.

    Text with any line that does not start with a marker is returned unchanged.
    """

    if _UNMARKED_LINE_RE.search(text):
        return text

    text = _LEADING_HASHES_RE.sub(lambda match: " " * len(match.group(1)), text)
    return _BLANK_LINE_RE.sub("", text)


def strip_stars(text: str) -> str:
    """Blank out `/* ... */` delimiters and leading `*` gutters."""

    text = _DOCUMENT_METHOD_RE.sub("", text)
    text = _COMMENT_OPEN_RE.sub(_blank_out, text, count=1)
    text = _COMMENT_CLOSE_RE.sub(_blank_out, text, count=1)
    text = _LEADING_STAR_RE.sub(_blank_out, text)
    return _BLANK_LINE_RE.sub("", text)


def expand_tabs(text: str) -> str:
    """Expand tabs to the next multiple-of-eight column on each line."""

    expanded: list[str] = []
    for line in text.split("\n"):
        while "\t" in line:
            head, _, tail = line.partition("\t")
            line = f"{head}{' ' * (TAB_WIDTH - len(head) % TAB_WIDTH)}{tail}"
        expanded.append(line)
    return "\n".join(expanded)


def flush_left(text: str) -> str:
    """Remove the left margin shared by all non-blank lines."""

    lines = text.split("\n")
    indents = [
        match.start()
        for match in (_NON_WHITESPACE_RE.search(line) for line in lines)
        if match is not None
    ]
    if not indents:
        indent = max((len(line) for line in lines), default=0)
    else:
        indent = min(indents)

    flushed: list[str] = []
    for line in lines:
        leading_spaces = len(line) - len(line.lstrip(" "))
        flushed.append(line[min(leading_spaces, indent):])
    return "\n".join(flushed)


def strip_newlines(text: str) -> str:
    """Trim leading and trailing newlines from the whole text.

    A remainder made only of whitespace collapses to a single space, while a
    text made only of newlines becomes empty.
    """

    stripped = text.strip("\n")
    if stripped and stripped.isspace():
        return " "
    return stripped


class NormalizerRule(Protocol):
    """Protocol for comment normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class StripHashes:
    """Strip `#`-style comment markers."""

    def apply(self, text: str) -> str:
        return strip_hashes(text)


class StripStars:
    """Strip `/* ... */`-style comment markers."""

    def apply(self, text: str) -> str:
        return strip_stars(text)


class ExpandTabs:
    """Expand tab characters to eight-column stops."""

    def apply(self, text: str) -> str:
        return expand_tabs(text)


class FlushLeft:
    """Remove the common left margin."""

    def apply(self, text: str) -> str:
        return flush_left(text)


class StripNewlines:
    """Trim newlines surrounding the comment body."""

    def apply(self, text: str) -> str:
        return strip_newlines(text)


_MARKER_RULES: dict[str, type[StripHashes] | type[StripStars]] = {
    "hash": StripHashes,
    "stars": StripStars,
}

COMMENT_STYLES = frozenset(_MARKER_RULES)


class CommentNormalizer:
    """Apply a sequence of comment normalization rules.

    The default sequence strips hash markers, expands tabs, flushes the text
    left and trims surrounding newlines. Each rule relies on the shape produced
    by the one before it, so custom sequences should keep that order.
    """

    def __init__(self, rules: list[NormalizerRule] | None = None) -> None:
        """Initialize with custom rules or the default hash-style sequence."""

        self.rules = rules or [
            StripHashes(),
            ExpandTabs(),
            FlushLeft(),
            StripNewlines(),
        ]

    @classmethod
    def for_style(cls, comment_style: str) -> CommentNormalizer:
        """Build a normalizer whose first rule strips markers of `comment_style`."""

        try:
            marker_rule = _MARKER_RULES[comment_style]
        except KeyError as exc:
            supported = ", ".join(sorted(COMMENT_STYLES))
            raise ValueError(
                f"Unsupported comment style `{comment_style}`; expected one of: {supported}."
            ) from exc
        return cls([marker_rule(), ExpandTabs(), FlushLeft(), StripNewlines()])

    def normalize(self, text: str) -> str:
        """Apply all configured rules in order; empty text is returned as-is."""

        if not text:
            return text

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current


def normalize_comment(text: str) -> str:
    """Normalize hash-style comment text with the default rule sequence."""

    return CommentNormalizer().normalize(text)
