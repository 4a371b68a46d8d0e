"""Configuration model and loaders for commenttext commands.

Responsibilities:
- Define command configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `CommentTextConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `CommentTextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .text.normalizer import COMMENT_STYLES

_DEFAULT_COMMENT_STYLE = "hash"
_DEFAULT_LOG_LEVEL = "INFO"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)
_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class CommentTextConfig:
    """Configuration for one command invocation.

    Attributes:
        comment_style: Marker style stripped before normalization (`hash` or `stars`).
        typography: Whether rendered paragraphs go through the typographic scanner.
        log_level: Minimum `loguru` level written to the diagnostic stream.
    """

    comment_style: str = _DEFAULT_COMMENT_STYLE
    typography: bool = True
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before a command runs."""

        if self.comment_style not in COMMENT_STYLES:
            supported = ", ".join(sorted(COMMENT_STYLES))
            raise ValueError(
                f"`comment_style` must be one of: {supported} (got `{self.comment_style}`)."
            )
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            raise ValueError(f"`log_level` `{self.log_level}` is not a known log level.")


def _parse_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token, returning `None` when unrecognized."""

    if isinstance(value, bool):
        return value
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def _strip_or_none(value: object) -> str | None:
    """Return a stripped string, or `None` for missing and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


class ConfigLoader:
    """Factory methods for loading `CommentTextConfig` objects."""

    _YAML_KEYS = frozenset({"comment_style", "typography", "log_level"})

    @staticmethod
    def from_yaml(path: Path) -> CommentTextConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CommentTextConfig:
        """Create a validated config from `COMMENTTEXT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        comment_style = (
            _strip_or_none(env_map.get("COMMENTTEXT_COMMENT_STYLE")) or _DEFAULT_COMMENT_STYLE
        )
        log_level = _strip_or_none(env_map.get("COMMENTTEXT_LOG_LEVEL")) or _DEFAULT_LOG_LEVEL
        typography = True
        raw_typography = _strip_or_none(env_map.get("COMMENTTEXT_TYPOGRAPHY"))
        if raw_typography is not None:
            parsed = _parse_boolean(raw_typography)
            if parsed is None:
                raise ValueError(
                    "Environment variable `COMMENTTEXT_TYPOGRAPHY` must be a boolean value."
                )
            typography = parsed

        config = CommentTextConfig(
            comment_style=comment_style.lower(),
            typography=typography,
            log_level=log_level.upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> CommentTextConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._YAML_KEYS)
        if unknown:
            key_list = ", ".join(f"`{key}`" for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        comment_style = (
            ConfigLoader._optional_string(payload, "comment_style", source_label)
            or _DEFAULT_COMMENT_STYLE
        )
        log_level = (
            ConfigLoader._optional_string(payload, "log_level", source_label)
            or _DEFAULT_LOG_LEVEL
        )
        typography = ConfigLoader._optional_boolean(
            payload,
            "typography",
            source_label,
            default=True,
        )

        config = CommentTextConfig(
            comment_style=comment_style.lower(),
            typography=typography,
            log_level=log_level.upper(),
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _optional_string(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> str | None:
        """Read an optional string field, treating blank values as missing."""

        value = payload.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"{source_label} field `{key}` must be a string.")
        return _strip_or_none(value)

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, *, default: bool
    ) -> bool:
        """Read an optional boolean field accepting YAML booleans and text tokens."""

        value = payload.get(key)
        if value is None:
            return default
        parsed = _parse_boolean(value)
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
