"""logging.py
Holds configured loggers for the parser, scorers, API and test runs.
"""
from typing import Literal, Optional
import logging
import os
import sys
from datetime import datetime
from dotenv import load_dotenv

load_dotenv()  # load .env

ENV = os.getenv("ENV", "development")  # e.g., development, staging, prod

# Overrides the per-type default level when set (e.g. LOG_LEVEL=WARNING)
LOG_LEVEL = os.getenv("LOG_LEVEL")

LoggerType = Literal["default", "pytest", "extractor", "scorer"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Environments that also write log files under `base_log_folder`
FILE_LOGGING_ENVS = ("development", "local", "test")


def running_under_pytest() -> bool:
    """Return True when the current process was launched by pytest."""
    return any("pytest" in arg for arg in sys.argv)


def parse_log_level(value: Optional[str]) -> Optional[int]:
    """
    Turn a LOG_LEVEL setting into a numeric level.

    Accepts a level name in any case ("warning") or a non-negative number ("10").
    Returns None for an empty or unrecognised value, so callers keep their default.
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    if value.isdigit():
        return int(value)
    # getLevelName maps a known name to its int, anything else to a "Level x" str
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else None


class LoggerFactory:
    """
    Factory to create configured loggers for the resume pipeline.

    Logging behavior depends on environment (ENV):
      - Console logging is optional.
      - In development/local/test each logger also writes a timestamped file,
        one folder per logger type (`logs/scoring/`, `logs/extraction_failures/`, ...).
      - Any other environment (e.g. staging, production) logs to the console
        only; the process supervisor collects stdout/stderr.
      - Handlers are attached once per logger name and never propagate to root.
    """

    def __init__(self, env: str = ENV, base_log_folder: str = "logs"):
        self.env = env
        self.base_log_folder = base_log_folder

    @property
    def writes_files(self) -> bool:
        return self.env in FILE_LOGGING_ENVS

    def get_logger(
        self,
        name: str,
        logger_type: LoggerType = "default",
        console: bool = True
    ) -> logging.Logger:
        """
        Create and return a configured logger based on type.

        `default` and `pytest` loggers record DEBUG, `extractor` and `scorer`
        loggers record INFO and up, unless LOG_LEVEL says otherwise.
        """
        logger = logging.getLogger(name)
        if logger.handlers:
            return logger

        logger.propagate = False
        logger.setLevel(self._level_for_type(logger_type))

        formatter = logging.Formatter(LOG_FORMAT)

        if console:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        if self.writes_files:
            logger.addHandler(
                self._timestamped_file_handler(self._get_log_folder_for_type(logger_type), name)
            )

        # Never leave a logger without somewhere to write
        if not logger.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        return logger

    def get_extractor_field_logger(self, field_name: str) -> logging.Logger:
        """
        Return a per-field extractor logger for entries an extractor had to skip.

        Writes to its own subfolder when file logging is on, e.g.
            logs/extraction_failures/experience/experience_20251028_103022.log
            logs/extraction_failures/education/education_20251028_103022.log

        Outside the file logging environments the records are dropped.
        """
        safe_field_name = field_name or "other"

        logger = logging.getLogger(f"extractor_{safe_field_name}")
        if logger.handlers:
            return logger

        logger.setLevel(logging.DEBUG)
        logger.propagate = False  # do not print to console

        if self.writes_files:
            log_folder = os.path.join(
                self.base_log_folder, "extraction_failures", safe_field_name
            )
            logger.addHandler(self._timestamped_file_handler(log_folder, safe_field_name))
        else:
            logger.addHandler(logging.NullHandler())

        return logger

    @staticmethod
    def _level_for_type(logger_type: LoggerType) -> int:
        override = parse_log_level(LOG_LEVEL)
        if override is not None:
            return override
        return logging.DEBUG if logger_type in ["default", "pytest"] else logging.INFO

    @staticmethod
    def _timestamped_file_handler(
        log_folder: str,
        stem: str,
        formatter: Optional[logging.Formatter] = None,
    ) -> logging.FileHandler:
        """Build a `FileHandler` for `<log_folder>/<stem>_<timestamp>.log`, creating the folder."""
        os.makedirs(log_folder, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        fh = logging.FileHandler(
            os.path.join(log_folder, f"{stem}_{timestamp}.log"),
            mode="a",
            encoding="utf-8",
        )
        fh.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
        return fh

    def _get_log_folder_for_type(self, logger_type: LoggerType) -> str:
        """Return folder path based on logger type."""
        if running_under_pytest():
            return os.path.join(self.base_log_folder, "tests")

        mapping = {
            "default": self.base_log_folder,
            "pytest": os.path.join(self.base_log_folder, "tests"),
            "extractor": os.path.join(self.base_log_folder, "extraction_failures"),
            "scorer": os.path.join(self.base_log_folder, "scoring"),
        }
        return mapping.get(logger_type, self.base_log_folder)
