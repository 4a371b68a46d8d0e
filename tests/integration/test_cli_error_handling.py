"""CLI error-handling tests for concise command diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from commenttext.cli import app
from commenttext.errors import MarkupParseError


def test_normalize_command_reports_missing_source(tmp_path: Path) -> None:
    """A missing input file should fail at the read stage with a hint."""

    result = CliRunner().invoke(app, ["normalize", str(tmp_path / "missing.rb")])

    assert result.exit_code == 1
    assert "normalize failed at stage `read`" in result.output
    assert "Hint: Pass an existing UTF-8 text file" in result.output


def test_command_reports_invalid_style() -> None:
    """An unsupported `--style` value should fail at the config stage."""

    result = CliRunner().invoke(app, ["normalize", "-", "--style", "slashes"], input="# a")

    assert result.exit_code == 1
    assert "normalize failed at stage `config`" in result.output


def test_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing YAML config should fail before any input is read."""

    result = CliRunner().invoke(
        app,
        ["html", "-", "--config", str(tmp_path / "absent.yml")],
        input="a",
    )

    assert result.exit_code == 1
    assert "html failed at stage `config`" in result.output
    assert "Config file not found" in result.output


def test_markup_command_dumps_parse_failure_before_exiting(tmp_path: Path) -> None:
    """Parser failures print the diagnostic dump and a build-stage error."""

    source = tmp_path / "comment.rb"
    source.write_text("# a\x00b\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["markup", str(source)])

    assert result.exit_code == 1
    assert "---8<---\na\x00b\n---8<---" in result.output
    assert (
        "[phase] level=ERROR stage=build event=failure "
        "classification=invalid_character error_type=MarkupParseError"
    ) in result.output
    assert "markup failed at stage `build`" in result.output
    assert "invalid_character" in result.output


def test_markup_command_reports_custom_parser_error(monkeypatch: MonkeyPatch) -> None:
    """Errors raised by the parser are mapped to the build stage."""

    def _failing_parse(*_: object, **__: object) -> None:
        """Raise a structured parse error to simulate a parser bug."""

        raise MarkupParseError("unexpected token", error_type="unexpected_token")

    monkeypatch.setattr("commenttext.cli.ParagraphParser.parse", _failing_parse)

    result = CliRunner().invoke(app, ["markup", "-"], input="# hi\n")

    assert result.exit_code == 1
    assert "Markup parser failed (unexpected_token): unexpected token" in result.output
    assert "---8<---\nhi\n---8<---" in result.output
