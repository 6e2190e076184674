#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG logging setup.

The console gets the records of the requested level, colored by level when
the stream is a terminal. Unless disabled, every DEBUG record also goes to a
rotating debug log file.
"""

import logging
import logging.handlers
import os
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from dniimg import DNIIMG_DEBUG_LOG_FILE, DNIIMG_DEBUG_LOGGING_DISABLED, __version__

colorama.just_fix_windows_console()

ANSI_ESCAPE = re.compile(r"\x1b\[[\d;]*m")


class ColoredFormatter(logging.Formatter):
    """DNIIMG Colored Logging Formatter.

    INFO records carry the message only, the other levels also the time since
    start and the source location.

    :cvar COLORS: Color prefix for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORS = {
        logging.DEBUG: colorama.Fore.BLUE,
        logging.INFO: colorama.Fore.WHITE + colorama.Style.BRIGHT,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }

    def __init__(self, colored: bool = True) -> None:
        """Create the formatter.

        :param colored: Wrap records into color escape sequences, otherwise
            escape sequences already present in messages are removed.
        """
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        """Format the record by its level.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        fmt = self.FORMAT if record.levelno == logging.INFO else self.FORMAT_DEBUG
        if self.colored:
            fmt = self.COLORS.get(record.levelno, "") + fmt + colorama.Style.RESET_ALL
        elif isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE.sub("", record.msg)
        return logging.Formatter(fmt).format(record)


def _use_color(stream: TextIO, colored: Optional[bool]) -> bool:
    if colored is not None:
        return colored
    # https://no-color.org/
    if "NO_COLOR" in os.environ:
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def _install_debug_file_handler(logger: logging.Logger) -> None:
    log_file = os.path.abspath(DNIIMG_DEBUG_LOG_FILE)
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            if handler.baseFilename == log_file:
                return
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        logger.warning(f"Failed to initialize debug logging: {str(exc)}")
        return
    file_handler.setFormatter(ColoredFormatter(colored=False))
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)

    logger.debug(f"DNIIMG {__version__} debug log started {datetime.now():%Y-%m-%d %H:%M:%S}")
    logger.debug(f"Command: {sys.argv}")


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install DNIIMG log handlers.

    Installing again replaces the console handler, the debug log file handler
    is added once.

    :param level: console logging level, defaults to logging.WARNING
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: force colored output on or off, detected from the stream by default
    :param logger: defaults to "dniimg" logger
    :param create_debug_logger: create rotating debug log file
    """
    target_logger = logger or logging.getLogger("dniimg")
    # handlers filter by their own level
    target_logger.setLevel(logging.DEBUG)

    for old_handler in list(target_logger.handlers):
        if type(old_handler) is logging.StreamHandler and isinstance(
            old_handler.formatter, ColoredFormatter
        ):
            target_logger.removeHandler(old_handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level or logging.WARNING)
    handler.setFormatter(ColoredFormatter(_use_color(stream, colored)))
    target_logger.addHandler(handler)

    if create_debug_logger and not DNIIMG_DEBUG_LOGGING_DISABLED:
        _install_debug_file_handler(target_logger)
