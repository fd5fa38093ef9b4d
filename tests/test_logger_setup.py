import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logger_setup


def test_configure_logging_updates_root_level():
    previous = logging.getLogger().level
    try:
        logger_setup.configure_logging("ERROR")
        assert logging.getLogger().level == logging.ERROR
    finally:
        logging.getLogger().setLevel(previous)


def test_level_from_value_falls_back():
    assert logger_setup._level_from_value("not-a-level") == logging.INFO
    assert logger_setup._level_from_value(None, fallback=logging.DEBUG) == logging.DEBUG
    assert logger_setup._level_from_value(logging.WARNING) == logging.WARNING
    assert logger_setup._level_from_value("debug") == logging.DEBUG
