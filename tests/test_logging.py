import logging

import pytest

from campus_api.app.core.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    configure_logging()


def test_module_loggers_write_to_the_log_file(tmp_path):
    logfile = tmp_path / "logs" / "campus_api.log"
    package_logger = configure_logging("debug", str(logfile))

    logging.getLogger("campus_api.app.services.resource_service").debug("Created HelpRequest 1")
    for handler in package_logger.handlers:
        handler.flush()

    assert "[DEBUG] campus_api.app.services.resource_service: Created HelpRequest 1" in logfile.read_text()


def test_reconfiguring_replaces_handlers(tmp_path):
    configure_logging("INFO", str(tmp_path / "first.log"))
    package_logger = configure_logging("WARNING")

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert configure_logging("chatty").level == logging.INFO


def test_root_logger_is_left_alone():
    root_handlers = list(logging.getLogger().handlers)
    configure_logging("DEBUG")
    assert logging.getLogger().handlers == root_handlers
