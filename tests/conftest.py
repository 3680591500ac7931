"""
Shared pytest fixtures for sparselsh tests.
"""

import logging
import random
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Root test_output directory, created once per session. Files written here
    (plots, CSV dumps) survive the run for inspection.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Per-test output directory: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source so statistical tests are reproducible."""
    return random.Random(42)


@pytest.fixture(autouse=True)
def reset_sparselsh_logging():
    """Give every test a clean sparselsh logger.

    Handlers added by one test (console, file, JSON) are closed and removed,
    the library's NullHandler is restored and the level is reset to inherit.
    """
    logger = logging.getLogger("sparselsh")

    def reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    reset()
    yield
    reset()
