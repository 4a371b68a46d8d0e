"""Command-line interface for commenttext.

Responsibilities:
- Expose user-facing commands for normalization and HTML rendering.
- Resolve `CommentTextConfig` from YAML, environment and CLI overrides.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Callable, TypeVar

import typer
from loguru import logger

from .cli_rendering import echo_result, exit_with_command_error
from .config import CommentTextConfig, ConfigLoader
from .errors import CommandStageError, MarkupParseError
from .markup import DocumentBuilder, HtmlFormatter, ParagraphParser
from .telemetry.logger import RunLogger
from .text.normalizer import CommentNormalizer
from .text.typography import to_html

app = typer.Typer(
    name="commenttext",
    no_args_is_help=True,
    help="Normalize source comments and render typographic HTML.",
)

_T = TypeVar("_T")

SourceArgument = Annotated[
    str,
    typer.Argument(help="Path to a file holding comment text, or `-` for stdin."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
StyleOption = Annotated[
    str | None,
    typer.Option("--style", help="Comment marker style: `hash` or `stars`."),
]


def _load_yaml_config(config_path: Path | None) -> CommentTextConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    comment_style: str | None,
    typography: bool | None = None,
) -> CommentTextConfig:
    """Resolve effective config: CLI flags over YAML, YAML over environment."""

    loaded_config = _load_yaml_config(config_file)
    if loaded_config is None:
        try:
            loaded_config = ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=str(exc),
                hint="Fix or unset the `COMMENTTEXT_*` environment variables.",
            ) from exc

    config = CommentTextConfig(
        comment_style=comment_style if comment_style is not None else loaded_config.comment_style,
        typography=typography if typography is not None else loaded_config.typography,
        log_level=loaded_config.log_level,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Use `--style hash` or `--style stars`.",
        ) from exc
    return config


def _read_source(source: str) -> str:
    """Read comment text from a file path or from stdin for `-`."""

    if source == "-":
        return typer.get_text_stream("stdin").read()

    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Failed to read comment text from `{source}`: {exc.strerror or exc}",
            hint="Pass an existing UTF-8 text file, or `-` to read stdin.",
        ) from exc


def _run_stage(run_logger: RunLogger, stage: str, action: Callable[[], _T]) -> _T:
    """Run one command stage between start/complete phase events."""

    run_logger.log_stage_start(stage)
    try:
        result = action()
    except MarkupParseError as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__, classification=exc.error_type)
        raise
    except Exception as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise
    run_logger.log_stage_complete(stage)
    return result


def _build_stage_error(exc: MarkupParseError) -> CommandStageError:
    """Describe a parser failure that has already been logged by its stage."""

    return CommandStageError(
        stage="build",
        detail=exc.summary(),
        hint="See the parse diagnostic above for the failing text.",
    )


@app.command("normalize")
def normalize_command(
    source: SourceArgument,
    style: StyleOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Strip comment markers, expand tabs and flush the comment text left."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_config(config_file, style)
        run_logger = RunLogger(level=config.log_level)
        raw_text = _run_stage(run_logger, "read", lambda: _read_source(source))
        normalizer = CommentNormalizer.for_style(config.comment_style)
        normalized = _run_stage(run_logger, "normalize", lambda: normalizer.normalize(raw_text))
    except Exception as exc:
        exit_with_command_error("normalize", exc)
    finally:
        if run_logger is not None:
            run_logger.close()

    echo_result(normalized)


@app.command("html")
def html_command(
    source: SourceArgument,
    config_file: ConfigOption = None,
) -> None:
    """Convert quotes, dashes, ellipses and symbols in raw text to HTML references."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_config(config_file, None)
        run_logger = RunLogger(level=config.log_level)
        raw_text = _run_stage(run_logger, "read", lambda: _read_source(source))
        html = _run_stage(run_logger, "render", lambda: to_html(raw_text))
    except Exception as exc:
        exit_with_command_error("html", exc)
    finally:
        if run_logger is not None:
            run_logger.close()

    echo_result(html)


@app.command("markup")
def markup_command(
    source: SourceArgument,
    style: StyleOption = None,
    typography: Annotated[
        bool | None,
        typer.Option(
            "--typography/--no-typography",
            help="Apply typographic substitutions to paragraph text.",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Normalize a comment, parse it into paragraphs and render HTML."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_config(config_file, style, typography)
        run_logger = RunLogger(level=config.log_level)
        raw_text = _run_stage(run_logger, "read", lambda: _read_source(source))
        builder = DocumentBuilder(
            ParagraphParser(),
            normalizer=CommentNormalizer.for_style(config.comment_style),
        )
        try:
            document = _run_stage(run_logger, "build", lambda: builder.build(raw_text))
        except MarkupParseError as exc:
            raise _build_stage_error(exc) from exc
        formatter = HtmlFormatter(typography=config.typography)
        html = _run_stage(run_logger, "render", lambda: formatter.format(document))
    except Exception as exc:
        exit_with_command_error("markup", exc)
    finally:
        if run_logger is not None:
            run_logger.close()

    echo_result(html)


def main() -> None:
    """CLI entrypoint for console scripts."""

    # Commands attach their own `RunLogger` handler; drop loguru's default one.
    logger.remove()
    app()


if __name__ == "__main__":
    main()
