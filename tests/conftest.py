"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Make the src layout importable without installing the package."""
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TERMHINT_* variables so config tests start from defaults."""
    import os

    for name in list(os.environ):
        if name.startswith("TERMHINT_"):
            monkeypatch.delenv(name, raising=False)
    from termhint.config import reset_overlay_config

    reset_overlay_config()
    yield monkeypatch
    reset_overlay_config()


@pytest.fixture
def sample_registry():
    """Registry with three 10x10 targets used by the spatial tests."""
    from termhint.schemas import Rect, Target
    from termhint.services import TargetRegistry

    registry = TargetRegistry()
    registry.register(Target(id=1, rect=Rect.of(0, 0, 10, 10)))
    registry.register(Target(id=2, rect=Rect.of(5, 5, 10, 10)))
    registry.register(Target(id=3, rect=Rect.of(20, 20, 10, 10)))
    return registry


@pytest.fixture
def package_logger():
    """The termhint logger. It and the quieted libraries are restored afterwards."""
    import logging

    from termhint.utils.logging.logging_config import NOISY_LIBRARIES, PACKAGE_LOGGER

    loggers = [logging.getLogger(name) for name in [PACKAGE_LOGGER, *NOISY_LIBRARIES]]
    saved = [(list(lg.handlers), lg.level, lg.propagate) for lg in loggers]
    yield loggers[0]
    for lg, (handlers, level, propagate) in zip(loggers, saved):
        lg.handlers = handlers
        lg.setLevel(level)
        lg.propagate = propagate
