"""
Logging configuration of prodreport.

Logging is configured from the packaged `logging.ini`. The level and the handler of the root and the
uvicorn logger are set with `set_logging`, module loggers created before stay enabled.
"""

import logging
import logging.config
import logging.handlers
from datetime import datetime
from typing import Literal
import os

LOG_FILE_PATH = f'logs/prodreport_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
CONFIG_LOCATION = os.path.join(os.path.dirname(__file__), "logging.ini")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logging_handler_dict = {
    "console": "consoleHandler",
    "file": "fileHandler",
    "null": "nullHandler",
}


class DelayedRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file handler that creates the log file and its folder with the first record."""

    def __init__(self, filename, mode='a', maxBytes=0, backupCount=0, encoding=None, delay=True):
        super().__init__(filename, mode, maxBytes, backupCount, encoding, delay)

    def _open(self):
        directory = os.path.dirname(self.baseFilename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return super()._open()


def set_logging(log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING",
    logging_handler: Literal["null", "console", "file"] = "console",
    Log_file_path: str = LOG_FILE_PATH
):
    """
    Configures the root and the uvicorn logger of a report run or the report service.

    Args:
        log_level (str, optional): Level of the log records to emit, case insensitive. Defaults to "WARNING".
        logging_handler (str, optional): One of "console", "file" or "null". Defaults to "console".
        Log_file_path (str, optional): Path of the log file for the "file" handler. Defaults to a timestamped file in logs/.

    Raises:
        ValueError: If the log level or the handler is unknown.
    """
    log_level = str(log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level}, expected one of {', '.join(LOG_LEVELS)}.")
    if logging_handler not in logging_handler_dict:
        raise ValueError(
            f"Unknown logging handler {logging_handler}, expected one of {', '.join(logging_handler_dict)}."
        )
    logging.config.fileConfig(
        CONFIG_LOCATION,
        defaults={
            "logfilename": Log_file_path,
            "loglevel": log_level,
            "logginghandler": logging_handler_dict[logging_handler],
        },
        disable_existing_loggers=False,
    )
    logging.getLogger(__name__).debug(f"Logging set to {log_level} with {logging_handler} handler.")
