import logging
import pytest
from typing import List

from design_patterns.infrastructure.logging.logger import DetailedFormatter


@pytest.fixture
def lines() -> List[str]:
    """Output sink backing store; pass ``lines.append`` as ``emit``."""
    return []


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DP_* overrides from the outer environment out of tests."""
    for name in ("DP_LOG_LEVEL", "DP_LOG_DESTINATION", "DP_LOG_FILE", "DP_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Drop handlers installed by setup_logging() so tests stay isolated."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, DetailedFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
