"""Comment text transforms.

This package provides marker stripping, whitespace normalization and the
typographic HTML scanner applied to leaf text by formatters.
"""

from .normalizer import (
    COMMENT_STYLES,
    CommentNormalizer,
    ExpandTabs,
    FlushLeft,
    StripHashes,
    StripNewlines,
    StripStars,
    expand_tabs,
    flush_left,
    normalize_comment,
    strip_hashes,
    strip_newlines,
    strip_stars,
)
from .typography import ScanState, to_html

__all__ = [
    "COMMENT_STYLES",
    "CommentNormalizer",
    "StripHashes",
    "StripStars",
    "ExpandTabs",
    "FlushLeft",
    "StripNewlines",
    "normalize_comment",
    "strip_hashes",
    "strip_stars",
    "expand_tabs",
    "flush_left",
    "strip_newlines",
    "ScanState",
    "to_html",
]
