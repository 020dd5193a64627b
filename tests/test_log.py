import io
import logging

from dcatsieve.core.config import LoggingConfig
from dcatsieve.core.log import PACKAGE_LOGGER_NAME, configure_logging, get_logger, temp_level


def test_package_logger_has_null_handler():
    logger = get_logger()

    assert logger.name == PACKAGE_LOGGER_NAME
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_configure_logging_sets_level_and_does_not_stack_handlers():
    name = "dcatsieve.test.configure"
    stream = io.StringIO()

    configure_logging(level="DEBUG", stream=stream, logger_name=name)
    logger = configure_logging(level="DEBUG", stream=stream, logger_name=name)
    logger.debug("hello %s", "world")

    assert logger.level == logging.DEBUG
    assert len([h for h in logger.handlers if isinstance(h, logging.StreamHandler)]) == 1
    assert "hello world" in stream.getvalue()


def test_temp_level_changes_and_restores():
    logger = logging.getLogger("dcatsieve.test.temp")
    logger.setLevel(logging.WARNING)

    with temp_level("debug", name=logger.name):
        assert logger.level == logging.DEBUG

    assert logger.level == logging.WARNING


def test_logging_config_apply_targets_named_logger():
    name = "dcatsieve.test.apply"

    LoggingConfig(level="ERROR", propagate=True, logger_name=name).apply()

    logger = logging.getLogger(name)
    assert logger.level == logging.ERROR
    assert logger.propagate is True
