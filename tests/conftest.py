from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("pasos_tool")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
