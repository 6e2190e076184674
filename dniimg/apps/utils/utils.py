#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG application utilities and helper functions.

Error handling for the command line tools and formatting of binary data.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable

import click
import hexdump

from dniimg import DNIIMG_DEBUG_LOG_FILE, DNIIMG_DEBUG_LOGGING_DISABLED
from dniimg.exceptions import DNIImgError

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class DNIImgUsageError(click.UsageError):
    """Wrong usage of the command line tool, reported with the usage text."""

    exit_code = EXIT_FAILURE


def format_raw_data(data: bytes) -> str:
    """Format bytes as hexdump with addresses and ASCII column.

    :param data: Data to format
    :return: formatted multiline string
    """
    return hexdump.hexdump(data, result="return")


def catch_dniimg_error(function: Callable) -> Callable:
    """Catch and handle DNIImgError and other exceptions.

    Every failure ends the process with status 1:

    - DNIImgError and AssertionError print the error and log the traceback
      into the debug log.
    - Any other exception (including KeyboardInterrupt) is reported as
      GENERAL ERROR.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except (AssertionError, DNIImgError) as dniimg_exc:
            click.echo(f"{dniimg_exc.__class__.__name__}: {dniimg_exc}", err=True)
            logger.debug(str(dniimg_exc), exc_info=True)
            if not DNIIMG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {DNIIMG_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(EXIT_FAILURE)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not DNIIMG_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {DNIIMG_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(EXIT_FAILURE)

    return wrapper
