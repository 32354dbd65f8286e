"""
Shared pytest fixtures for test suite.
"""

import logging

import pytest

from design_kata import logging_config
from design_kata.models.product import Color, Product, Size


@pytest.fixture
def catalog():
    """The tree/apple/ocean catalog used by the product demonstration."""
    return [
        Product("tree", Color.GREEN, Size.LARGE),
        Product("apple", Color.GREEN, Size.SMALL),
        Product("ocean", Color.BLUE, Size.LARGE),
    ]


@pytest.fixture
def wide_catalog():
    """Every color/size combination, in a fixed order."""
    return [
        Product(f"{color.value}-{size.value}", color, size)
        for color in Color
        for size in Size
    ]


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """
    Points log files at tmp_path, drops the handlers setup_logging() installs and
    puts back the root handlers it removed,
    so logging configuration never leaks between tests.
    """
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logging_config, "LOG_DIR", log_dir)
    monkeypatch.setenv("DESIGN_KATA_NO_COLOR", "1")

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield log_dir

    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(original_level)

    audit_logger = logging.getLogger(logging_config.AUDIT_LOGGER_NAME)
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()
    audit_logger.setLevel(logging.NOTSET)
    audit_logger.propagate = True
