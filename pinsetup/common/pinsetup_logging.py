"""
pinsetup logging

pinsetup logging is configured so by default logs to console with the level configured. Records below WARNING go
to stdout and warnings and errors go to stderr, so every per-pin diagnostic lands on stderr. Optionally, everything
is also logged to a rotating file with timestamps.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic_settings import BaseSettings

from pinsetup.common.constants import CTE

# Global logging settings. They should only be modified from set_logging_configuration.
_DEBUG: bool = False
_LOG_LEVEL: int = logging.INFO
_LOG_FILE: Path | None = None

PACKAGE_LOGGER_NAME: str = 'pinsetup'

CONSOLE_LOG_FORMATTER: logging.Formatter = logging.Formatter('%(message)s')
COMMON_LOG_FORMATTER: logging.Formatter = \
    logging.Formatter('[%(asctime)s - %(levelname)s - %(name)s/%(funcName)s]: %(message)s')


class LoggingSettings(BaseSettings):
    """ Logging settings read from the environment before the command line is parsed """
    pinsetup_debug: bool = False
    pinsetup_log_level: str = 'INFO'
    pinsetup_log_file: str | None = None


class _BelowLevelFilter(logging.Filter):
    """ Lets through only the records strictly below the given level """
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def set_logging_configuration(debug: bool,
                              log_level: int | str = _LOG_LEVEL,
                              log_file: str | Path | None = None) -> None:
    global _DEBUG, _LOG_LEVEL, _LOG_FILE
    _DEBUG = debug

    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    _LOG_LEVEL = log_level if isinstance(log_level, int) else logging.INFO

    if isinstance(log_file, str):
        log_file = Path(log_file)
    _LOG_FILE = log_file

    if _LOG_FILE is not None and not _LOG_FILE.parent.exists():
        logging.warning(f"Configured logging directory {_LOG_FILE.parent} doesn't exist, creating it.")
        _LOG_FILE.parent.mkdir(parents=True)


def _effective_level() -> int:
    return logging.DEBUG if _DEBUG else _LOG_LEVEL


def __get_stdout_handler() -> logging.StreamHandler:
    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setFormatter(CONSOLE_LOG_FORMATTER)
    stdout_handler.setLevel(_effective_level())
    stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    return stdout_handler


def __get_stderr_handler() -> logging.StreamHandler:
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(CONSOLE_LOG_FORMATTER)
    stderr_handler.setLevel(max(logging.WARNING, _effective_level()))
    return stderr_handler


def __get_file_handler(log_file: Path) -> logging.FileHandler:
    """
    Creates a rotating file handler, which rotates logs when they reach CTE.LOG_FILE_MAX_BYTES.

    Args:
        log_file: path of the log file

    Returns:
        logging.FileHandler: the file handler object with the timestamped format

    Raises:
        OSError: an error occurred while creating or opening the log file.
    """
    file_handler = RotatingFileHandler(log_file, maxBytes=CTE.LOG_FILE_MAX_BYTES)
    file_handler.setFormatter(COMMON_LOG_FORMATTER)
    file_handler.setLevel(_effective_level())
    return file_handler


def get_pinsetup_logger(name: str | None = None) -> logging.Logger:
    """
    Configures the pinsetup package logger. Module loggers created with logging.getLogger(__name__) inside the
    package propagate to it. Calling it again replaces the handlers, so a new configuration takes effect without
    duplicating output.
    Args:
        name: The name of the logger. Defaults to the package logger.

    Returns:
        A logging.Logger object that has been configured according to the current settings.
    """
    package_logger = logging.getLogger(name or PACKAGE_LOGGER_NAME)
    package_logger.propagate = False
    package_logger.setLevel(_effective_level())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(__get_stdout_handler())
    package_logger.addHandler(__get_stderr_handler())
    if _LOG_FILE is not None:
        package_logger.addHandler(__get_file_handler(_LOG_FILE))

    return package_logger
