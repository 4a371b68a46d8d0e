"""Exceptions raised by commenttext.

`MarkupParseError` is the contract between the document builder and any
parser it is given; `CommandStageError` only ever reaches the CLI layer.
Both derive from `CommentTextError` so callers can catch either.
"""

from __future__ import annotations


class CommentTextError(RuntimeError):
    """Base class for errors raised by commenttext."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MarkupParseError(CommentTextError):
    """Raised by a markup parser that cannot turn normalized text into a document.

    Attributes:
        error_type: Short machine-readable classification, e.g. `invalid_character`.
        trace: Parser-supplied location entries, outermost first. Empty when the
            parser has none, in which case diagnostics fall back to the traceback.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: str = "parse_error",
        trace: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.trace = tuple(trace)

    def summary(self) -> str:
        """One-line description naming the classification."""

        return f"Markup parser failed ({self.error_type}): {self.message}"


class CommandStageError(CommentTextError):
    """A CLI command failed in one named stage (`config`, `read`, `build`...)."""

    def __init__(self, *, stage: str, detail: str, hint: str | None = None) -> None:
        super().__init__(detail)
        self.stage = stage
        self.hint = hint

    def headline(self, command_name: str) -> str:
        return f"{command_name} failed at stage `{self.stage}`: {self.message}"
