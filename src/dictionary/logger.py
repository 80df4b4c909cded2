"""Structured debug logging (timestamp, query, result, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

_LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)

_file_handler: Union[logging.handlers.RotatingFileHandler, None] = None


def setup_logging(
    log_file: Path,
    level: int = logging.INFO,
) -> logging.handlers.RotatingFileHandler:
    """Route the root logger to a rotating log file.

    Any handler already attached to the root logger is removed first,
    so calling this twice leaves a single file handler in place.

    Args:
        log_file (Path): The file to write log records to.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.handlers.RotatingFileHandler: The installed handler.

    """
    global _file_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _file_handler = file_handler
    return file_handler


def teardown_logging() -> None:
    """Detach and close the handler installed by setup_logging()."""
    global _file_handler
    if _file_handler is not None:
        _file_handler.flush()
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log(
    time_stamp: str,
    query: str,
    found: bool,
    suggestion_count: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a query execution using the configured
    logging system.

    Args:
        time_stamp (str): The timestamp of the query execution.
        query (str): The query string.
        found (bool): Whether the query is a stored word.
        suggestion_count (int): How many completions were returned.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Timestamp: %s, Query: '%s', Found: %s, Suggestions: %d, "
        "Execution Time: %.2f ms",
        time_stamp,
        query,
        found,
        suggestion_count,
        execution_time_ms,
    )
