"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from commenttext.cli_rendering import exit_with_command_error
from commenttext.errors import CommandStageError, CommentTextError, MarkupParseError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="read",
        detail="Failed to read comment text from `missing.rb`: No such file or directory",
        hint="Pass an existing UTF-8 text file, or `-` to read stdin.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("normalize", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "normalize failed at stage `read`" in captured.err
    assert "Hint: Pass an existing UTF-8 text file, or `-` to read stdin." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("html", RuntimeError("unexpected scanner error"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "html failed: unexpected scanner error" in captured.err


def test_command_errors_share_a_catchable_base() -> None:
    """Parse and stage errors both derive from `CommentTextError`."""

    parse_error = MarkupParseError("bad byte", error_type="invalid_character")
    stage_error = CommandStageError(stage="build", detail=parse_error.summary())

    assert isinstance(parse_error, CommentTextError)
    assert isinstance(stage_error, CommentTextError)
    assert stage_error.message == "Markup parser failed (invalid_character): bad byte"
    assert stage_error.headline("markup") == (
        "markup failed at stage `build`: Markup parser failed (invalid_character): bad byte"
    )
