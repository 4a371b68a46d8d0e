"""Shared pytest fixtures for the full commenttext test suite."""

from __future__ import annotations

from contextlib import suppress
from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture
def loguru_messages() -> Iterator[list[str]]:
    """Collect messages logged through `loguru` while a test runs."""

    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    with suppress(ValueError):
        logger.remove(handler_id)
