from __future__ import annotations

import logging
from typing import Iterator

import pytest

from local_inference_client.common.logging_setup import HANDLER_NAME, PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_root_handlers_are_left_alone(package_logger: logging.Logger) -> None:
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        before = list(root.handlers)
        setup_logging()
        assert root.handlers == before
    finally:
        root.removeHandler(marker)


def test_repeated_calls_keep_one_handler(package_logger: logging.Logger) -> None:
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging()
    setup_logging(logging.DEBUG)

    ours = [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert foreign in package_logger.handlers
    assert package_logger.level == logging.DEBUG


def test_importing_app_does_not_touch_root_logging() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    import local_inference_client.serve.fastapi_app  # noqa: F401

    assert root.handlers == before
