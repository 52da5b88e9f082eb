import logging

import pytest

from swagger_jsonschema import Config
from swagger_jsonschema.utils.logger import LIBRARY_LOGGER, Logger, MultilineFileHandler


@pytest.fixture(autouse=True)
def reset_library_logger():
    yield
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
        handler.close()
    library_logger.setLevel(logging.NOTSET)


def test_configure_logger_levels():
    Logger.configure_logger(Config(debug=True))
    assert logging.getLogger(LIBRARY_LOGGER).level == logging.DEBUG

    Logger.configure_logger(Config())
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    assert library_logger.level == logging.INFO
    assert len(library_logger.handlers) == 1


def test_configure_logger_file(tmp_path):
    log_file = tmp_path / "logs" / "conversion.log"
    Logger.configure_logger(Config(debug=True, log_file=str(log_file)))

    logger = Logger.get_logger(f"{LIBRARY_LOGGER}.tests")
    logger.debug("first line\n\nsecond line")
    for handler in logging.getLogger(LIBRARY_LOGGER).handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("DEBUG - first line")
    assert lines[1].endswith("DEBUG - second line")

    Logger.configure_logger(Config())
    assert not any(isinstance(h, MultilineFileHandler) for h in logging.getLogger(LIBRARY_LOGGER).handlers)


def test_file_handler_writes_traceback_after_last_line(tmp_path):
    log_file = tmp_path / "conversion.log"
    Logger.configure_logger(Config(log_file=str(log_file)))

    logger = Logger.get_logger(f"{LIBRARY_LOGGER}.tests")
    logger.info("   ")
    try:
        raise ValueError("broken reference")
    except ValueError:
        logger.exception("Error converting schema:\n#/definitions/Missing")
    for handler in logging.getLogger(LIBRARY_LOGGER).handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("ERROR - Error converting schema:")
    assert lines[1].endswith("ERROR - #/definitions/Missing")
    assert lines[2] == "Traceback (most recent call last):"
    assert lines[-1] == "ValueError: broken reference"
