import logging
import os
import sys
from typing import List

from ..configuration.config import Config

LIBRARY_LOGGER = "swagger_jsonschema"


class Logger:
    @staticmethod
    def configure_logger(config: Config):
        log_level = logging.DEBUG if config.debug else logging.INFO

        stdout_format = "%(message)s"
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(log_level)
        stdout_handler.setFormatter(logging.Formatter(stdout_format))
        handlers: List[logging.Handler] = [stdout_handler]

        if config.log_file:
            log_folder = os.path.dirname(config.log_file)
            if log_folder:
                os.makedirs(log_folder, exist_ok=True)

            file_handler = MultilineFileHandler(config.log_file)
            file_handler.setLevel(logging.DEBUG)  # Log everything to file by default
            file_handler.setFormatter(logging.Formatter(file_format))
            handlers.append(file_handler)

        library_logger = logging.getLogger(LIBRARY_LOGGER)
        library_logger.setLevel(log_level)
        for handler in list(library_logger.handlers):
            library_logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            library_logger.addHandler(handler)

    @staticmethod
    def get_logger(name: str):
        return logging.getLogger(name)


class MultilineFileHandler(logging.FileHandler):
    """Writes every non-empty line of a message as its own formatted log line."""

    def __init__(self, filename, mode="a", encoding="utf-8", delay=False):
        super().__init__(filename, mode, encoding, delay)

    def format(self, record: logging.LogRecord) -> str:
        lines = [line for line in record.getMessage().splitlines() if line.strip()]
        formatted: List[str] = []

        for index, line in enumerate(lines):
            last = index == len(lines) - 1
            line_record = logging.makeLogRecord(
                {
                    **record.__dict__,
                    "msg": line,
                    "args": None,
                    # Tracebacks go after the final line only
                    "exc_info": record.exc_info if last else None,
                    "exc_text": record.exc_text if last else None,
                    "stack_info": record.stack_info if last else None,
                }
            )
            formatted.append(super().format(line_record))

        return "\n".join(formatted)

    def emit(self, record: logging.LogRecord):
        if record.getMessage().strip():
            super().emit(record)
