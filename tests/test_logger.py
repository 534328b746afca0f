import logging

from kilatstorage.config.logger import configure_logging


def test_configure_logging_sets_level_and_quiets_sdk():
    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("botocore").level == logging.INFO


def test_configure_logging_twice_keeps_one_handler():
    configure_logging("INFO")
    configure_logging("WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_unknown_level_falls_back_to_info():
    configure_logging("LOUD")

    assert logging.getLogger().level == logging.INFO
