"""Top-level package for commenttext.

This package normalizes source-code comment text and converts its
typographic punctuation into HTML character references. The main entry
points are `normalize_comment`, `to_html` and `DocumentBuilder`.
"""

# Defined before the subpackage imports so they can read it at import time.
__version__ = "0.1.0"

from .markup import DocumentBuilder, markup
from .text import normalize_comment, strip_stars, to_html

__all__ = [
    "DocumentBuilder",
    "markup",
    "normalize_comment",
    "strip_stars",
    "to_html",
    "__version__",
]
