"""Make the src/ layout importable for local pytest runs and keep logs quiet."""

import logging
import sys
from pathlib import Path

import pytest
import structlog

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _quiet_structlog():
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


class ScriptedEngine:
    """Engine stand-in replaying fixed outputs."""

    def __init__(self, outputs):
        self._outputs = list(outputs)
        self.calls = 0

    def next(self):
        value = self._outputs[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedEngine
