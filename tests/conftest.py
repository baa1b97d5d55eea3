from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.icon_builder import IconTreeBuilder


@pytest.fixture
def icon_tree(tmp_path: Path) -> IconTreeBuilder:
    """Provide a reusable icon tree builder rooted at the pytest tmp_path."""
    return IconTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _propagate_glyphgen_logs() -> Iterator[None]:
    """Let caplog see glyphgen records even after the CLI configured logging."""
    logger = logging.getLogger("glyphgen")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    logger.propagate = True
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = propagate
    logger.setLevel(level)
