import logging

import pytest

from mdtodo.lib import logs


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger("mdtodo")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.mark.parametrize(
    "level,verbose,expected",
    [
        ("WARNING", False, logging.WARNING),
        ("info", False, logging.INFO),
        ("nonsense", False, logging.WARNING),
        ("ERROR", True, logging.DEBUG),
        (logging.ERROR, False, logging.ERROR),
    ],
)
def test_setup_logging_sets_package_level(level, verbose, expected):
    logs.setup_logging(level, verbose)
    assert logging.getLogger("mdtodo").level == expected
