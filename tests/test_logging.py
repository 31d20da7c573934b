import logging

from roundnetpairing.constants import DEFAULT_LOG_LEVEL
from roundnetpairing.utils import setup_logger


def test_unknown_level_falls_back_to_default():
    package_logger = logging.getLogger("roundnetpairing")
    previous = package_logger.level
    try:
        logger = setup_logger("roundnetpairing.tests", level="verbose")
        assert logger.name == "roundnetpairing.tests"
        assert package_logger.level == logging.getLevelName(DEFAULT_LOG_LEVEL)
    finally:
        package_logger.setLevel(previous)


def test_known_level_is_applied():
    package_logger = logging.getLogger("roundnetpairing")
    previous = package_logger.level
    try:
        setup_logger("roundnetpairing.tests", level="debug")
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous)
