"""Integration tests for the normalize, html and markup commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from commenttext.cli import app


@pytest.fixture(autouse=True)
def _clear_commenttext_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `COMMENTTEXT_*` variables from changing command defaults."""

    for key in ("COMMENTTEXT_COMMENT_STYLE", "COMMENTTEXT_TYPOGRAPHY", "COMMENTTEXT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_normalize_command_prints_normalized_comment(tmp_path: Path) -> None:
    """Normalize should strip hash markers and print flush-left text."""

    source = tmp_path / "comment.rb"
    source.write_text("##\n# a\n#\n# b\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["normalize", str(source)])

    assert result.exit_code == 0
    assert "a\n\nb\n" in result.output
    assert "[phase] level=INFO stage=normalize event=complete" in result.output


def test_normalize_command_supports_star_comments_from_stdin() -> None:
    """The stars style should strip C-style delimiters read from stdin."""

    result = CliRunner().invoke(
        app,
        ["normalize", "-", "--style", "stars"],
        input="/*\n * Hello\n *   world\n */\n",
    )

    assert result.exit_code == 0
    assert "Hello\n  world\n" in result.output


def test_html_command_converts_typography() -> None:
    """Html should convert dashes and quotes in raw text."""

    result = CliRunner().invoke(app, ["html", "-"], input="it's -- \"done\"")

    assert result.exit_code == 0
    assert "it&#8217;s &#8211; &#8220;done&#8221;" in result.output


def test_markup_command_renders_paragraphs(tmp_path: Path) -> None:
    """Markup should normalize, parse and render paragraphs."""

    source = tmp_path / "comment.rb"
    source.write_text("# we don't worry.\n#\n# (c) Acme\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["markup", str(source)])

    assert result.exit_code == 0
    assert "<p>we don&#8217;t worry.</p>\n<p>&#169; Acme</p>" in result.output


def test_markup_command_uses_yaml_config_with_cli_override(tmp_path: Path) -> None:
    """YAML defaults apply unless a CLI flag overrides them."""

    source = tmp_path / "comment.c"
    source.write_text("/*\n * a -- b\n */\n", encoding="utf-8")
    config_path = tmp_path / "commenttext.yml"
    config_path.write_text("comment_style: stars\ntypography: false\n", encoding="utf-8")

    plain = CliRunner().invoke(app, ["markup", str(source), "--config", str(config_path)])
    styled = CliRunner().invoke(
        app,
        ["markup", str(source), "--config", str(config_path), "--typography"],
    )

    assert plain.exit_code == 0
    assert "<p>a -- b</p>" in plain.output
    assert styled.exit_code == 0
    assert "<p>a &#8211; b</p>" in styled.output
