import logging

from yieldcalc.logger import configure_logging, get_logger


def test_configure_logging_is_idempotent():
    """Re-running the page must not stack duplicate handlers."""
    logger = configure_logging()
    count = len(logger.handlers)
    configure_logging(logging.DEBUG)
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG
    configure_logging()


def test_get_logger_namespaces_outside_modules():
    assert get_logger("yieldcalc.geometry").name == "yieldcalc.geometry"
    assert get_logger("__main__").name == "yieldcalc.__main__"
