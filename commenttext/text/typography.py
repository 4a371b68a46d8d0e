"""Typographic HTML conversion for comment text.

Responsibilities:
- Replace straight quotes, dashes, ellipses and `(c)`/`(r)` markers with
  numeric character references.
- Copy HTML tags untouched and keep `<tt>` spans free of substitutions.
- Track paired quote state across one input in a single left-to-right pass.

Key public functions:
- `to_html`: convert plain comment text into typographic HTML.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable

from loguru import logger

COPYRIGHT = "&#169;"
REGISTERED_TRADEMARK = "&#174;"
EM_DASH = "&#8212;"
EN_DASH = "&#8211;"
ELLIPSIS = "&#8230;"
OPEN_DOUBLE_QUOTE = "&#8220;"
CLOSE_DOUBLE_QUOTE = "&#8221;"
OPEN_SINGLE_QUOTE = "&#8216;"
CLOSE_SINGLE_QUOTE = "&#8217;"

_LITERAL_RUN_RE = re.compile(r".+?(?=[<\\.(\"'`&-])", re.DOTALL)
_WORD_END_RE = re.compile(r"\w\Z")


@dataclass(slots=True)
class ScanState:
    """Mutable quote/word state for one `to_html` call.

    Attributes:
        single_quote_open: Whether an opening single quote awaits its closer.
        double_quote_open: Whether an opening double quote awaits its closer.
        after_word: Whether the last literal run ended with a word character;
            `None` once a substitution has been emitted.
    """

    single_quote_open: bool = False
    double_quote_open: bool = False
    after_word: bool | None = None


Emitter = Callable[[re.Match[str], ScanState], str]


@dataclass(frozen=True, slots=True)
class ScanRule:
    """One punctuation recognizer in the ordered scan dispatch."""

    name: str
    pattern: re.Pattern[str]
    emit: Emitter


class _Lookahead:
    """Memoized `str.find` results for a scan that only moves forward.

    A cached index stays valid until the scan position passes it; `-1` means
    the needle does not occur again, so it is never searched for twice.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._found: dict[str, int] = {}

    def find(self, needle: str, start: int) -> int:
        found = self._found.get(needle)
        if found is None or 0 <= found < start:
            found = self._text.find(needle, start)
            self._found[needle] = found
        return found


def _scan_tag(text: str, position: int, lookahead: _Lookahead) -> tuple[str, int] | None:
    """Recognize a `<tt>` span, a mismatched `<tt>` or an HTML tag at `position`.

    Returns the emitted text and the position after it, or `None` when the
    `<` does not open a tag.
    """

    if text.startswith("<tt>", position):
        body_start = position + len("<tt>")
        closer = lookahead.find("</tt>", body_start)
        newline = lookahead.find("\n", body_start)
        if closer != -1 and (newline == -1 or closer < newline):
            end = closer + len("</tt>")
            return text[position:end].replace("\\\\", "\\"), end
        logger.warning("mismatched <tt> tag")
        return "<tt>", body_start

    # a tag needs at least one character between `<` and the first `>`
    closer = lookahead.find(">", position + 1)
    if closer > position + 1:
        return text[position:closer + 1], closer + 1
    return None


def _escaped(match: re.Match[str], state: ScanState) -> str:
    return match.group(1)


def _ellipsis(match: re.Match[str], state: ScanState) -> str:
    return f"{match.group(1)}{ELLIPSIS}"


def _fixed(replacement: str) -> Emitter:
    """Return an emitter that always writes `replacement`."""

    def emit(match: re.Match[str], state: ScanState) -> str:
        return replacement

    return emit


def _double_quote(match: re.Match[str], state: ScanState) -> str:
    replacement = CLOSE_DOUBLE_QUOTE if state.double_quote_open else OPEN_DOUBLE_QUOTE
    state.double_quote_open = not state.double_quote_open
    return replacement


def _single_quote(match: re.Match[str], state: ScanState) -> str:
    if state.single_quote_open:
        state.single_quote_open = False
        return CLOSE_SINGLE_QUOTE
    if state.after_word:
        # Mary's dog, my parents' house: do not start paired quotes
        return CLOSE_SINGLE_QUOTE
    state.single_quote_open = True
    return OPEN_SINGLE_QUOTE


# Longer patterns precede their own prefixes (`---` before `--`, `''` before `'`).
SCAN_RULES: tuple[ScanRule, ...] = (
    ScanRule("escape", re.compile(r"\\(\S)"), _escaped),
    ScanRule("ellipsis", re.compile(r"\.\.\.(\.?)"), _ellipsis),
    ScanRule("copyright", re.compile(r"\(c\)"), _fixed(COPYRIGHT)),
    ScanRule("registered_trademark", re.compile(r"\(r\)"), _fixed(REGISTERED_TRADEMARK)),
    ScanRule("em_dash", re.compile(r"---"), _fixed(EM_DASH)),
    ScanRule("en_dash", re.compile(r"--"), _fixed(EN_DASH)),
    ScanRule("double_quote", re.compile(r"&quot;|\""), _double_quote),
    ScanRule("backtick_quote", re.compile(r"``"), _fixed(OPEN_DOUBLE_QUOTE)),
    ScanRule("tick_quote", re.compile(r"''"), _fixed(CLOSE_DOUBLE_QUOTE)),
    ScanRule("single_quote", re.compile(r"'"), _single_quote),
)


def to_html(text: str) -> str:
    """Convert dashes, ellipses, quotes and symbols in `text` to HTML references.

    Contents of `<tt>` spans and other HTML tags are copied verbatim. An
    unterminated `<tt>` logs a warning and is copied through unchanged.

    Args:
        text: Plain comment text, possibly containing inline HTML tags.

    Returns:
        Text with typographic substitutions applied.
    """

    html: list[str] = []
    state = ScanState()
    lookahead = _Lookahead(text)
    position = 0
    length = len(text)

    while position < length:
        if text[position] == "<":
            tag = _scan_tag(text, position, lookahead)
            if tag is not None:
                emitted, position = tag
                html.append(emitted)
                continue

        for rule in SCAN_RULES:
            match = rule.pattern.match(text, position)
            if match is None:
                continue
            html.append(rule.emit(match, state))
            state.after_word = None
            position = match.end()
            break
        else:
            match = _LITERAL_RUN_RE.match(text, position)
            if match is None:
                html.append(text[position:])
                break
            literal = match.group(0)
            html.append(literal)
            state.after_word = _WORD_END_RE.search(literal) is not None
            position = match.end()

    return "".join(html)
