import logging
import os
import sys
from typing import List

from ..configuration.config import Config

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LOGGERS = ("urllib3", "requests")


class Logger:
    @staticmethod
    def configure_logger(config: Config):
        """Sends progress to stdout and, when ``config.log_file`` is set, a full debug trace to that file."""
        log_level = logging.DEBUG if config.debug else logging.INFO

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(log_level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers: List[logging.Handler] = [console]

        if config.log_file:
            handlers.append(Logger._file_handler(config.log_file))

        # Re-running the CLI in one process replaces the previous handlers
        logging.basicConfig(level=logging.DEBUG if config.log_file else log_level, handlers=handlers, force=True)
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @staticmethod
    def get_logger(name: str):
        return logging.getLogger(name)

    @staticmethod
    def _file_handler(log_file: str) -> logging.Handler:
        folder = os.path.dirname(log_file)
        if folder:
            os.makedirs(folder, exist_ok=True)

        handler = MultilineFileHandler(log_file)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler


class MultilineFileHandler(logging.FileHandler):
    """File handler that splits multi-line messages (such as result tables) into one record per line."""

    def __init__(self, filename, mode="a", encoding="utf-8", delay=False):
        super().__init__(filename, mode, encoding, delay)

    def emit(self, record):
        try:
            lines = [line for line in record.getMessage().splitlines() if line.strip()]
            for line in lines:
                line_record = logging.makeLogRecord(record.__dict__)
                line_record.msg = line
                line_record.args = None
                super().emit(line_record)
        except Exception:
            self.handleError(record)
