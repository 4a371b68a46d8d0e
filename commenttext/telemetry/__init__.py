"""Logging and diagnostic helpers.

This package emits stage events and parse-failure dumps through `loguru`.
"""

from .logger import RunLogger, format_parse_failure, log_parse_failure

__all__ = ["RunLogger", "format_parse_failure", "log_parse_failure"]
