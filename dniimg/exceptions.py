#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG exception classes.

All errors raised by the library derive from :class:`DNIImgError`, so callers
can handle the whole family with a single ``except`` clause.
"""

from typing import Optional

#######################################################################
# # DNI Image Builder Exceptions
#######################################################################


class DNIImgError(Exception):
    """DNI Image Builder Base Exception.

    :cvar fmt: Default error message format template.
    """

    fmt = "DNIIMG: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base DNIIMG Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message, "Unknown Error" without description.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class DNIImgValueError(DNIImgError, ValueError):
    """DNIIMG standard value error exception."""


class DNIImgIOError(DNIImgError, IOError):
    """DNIIMG standard IO error exception.

    Raised when a file cannot be inspected, opened, read or written.
    """


class DNIImgAllocationError(DNIImgError, MemoryError):
    """DNIIMG buffer allocation error.

    Raised when the buffer for the output image cannot be obtained.
    """
