"""Test fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure parser settings in the test environment do not leak in."""
    for key in list(os.environ):
        if key.startswith("LINKHEADER_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logging.getLogger("linkheader").handlers = []
