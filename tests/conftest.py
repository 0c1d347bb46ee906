import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo any logging configuration a test applied through the CLI."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    # Only drop handlers installed by configure_logging, not pytest's own
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZEROARG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ZEROARG_LOG_FORMAT", raising=False)
