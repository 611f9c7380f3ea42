import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """Configure logging for all unit tests with the environment tag set to "test"."""
    from flag_parser.logging_utils import configure_logging

    configure_logging(level=logging.INFO)


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Reset the root logger after a test reconfigures it."""
    from flag_parser.logging_utils import configure_logging

    yield
    configure_logging(level=logging.INFO)
