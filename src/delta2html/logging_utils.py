#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the delta2html command line entry point.

Library modules only create module-level loggers; handlers are installed here
and only by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "delta2html"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a logging level; unknown names give INFO."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _console_handler(trace_mode: bool) -> logging.Handler:
    if sys.stderr.isatty():
        return RichHandler(
            console=Console(stderr=True),
            show_time=trace_mode,
            show_path=trace_mode,
            markup=False,
            rich_tracebacks=trace_mode,
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT if trace_mode else PLAIN_FORMAT, datefmt=TRACE_DATE_FORMAT))
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install handlers on the ``delta2html`` package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "DEBUG")
    log_file : str, optional
        Also append records to this file
    trace_mode : bool, default False
        Include timestamps and logger names

    Returns
    -------
    logging.Logger
        The package logger

    Notes
    -----
    Calling this again replaces the handlers installed by the previous call.
    A log file that cannot be opened is reported as a warning and skipped.

    """
    level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = _console_handler(trace_mode)
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT))
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
