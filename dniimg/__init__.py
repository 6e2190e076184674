#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG - DNI firmware image builder.

Turns a raw firmware payload into an image the board bootloader accepts:
a 128-byte textual metadata header, the payload and a one-byte checksum.
Boards whose bootloader expects headerless images get the payload verbatim.

Available as a Python library (:mod:`dniimg.image`) and as the ``mkdniimg``
command line tool.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_dniimg_version() -> Version:
    """Get DNIIMG version information.

    :return: Parsed version object.
    """
    from .__version__ import __version__ as dniimg_version

    return parse(dniimg_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_dniimg_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

DNIIMG_VERSION_BASE = version.base_version
DNIIMG_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="dniimg",
    version=DNIIMG_VERSION_BASE,
)

DNIIMG_DEBUG = value_to_bool(os.environ.get("DNIIMG_DEBUG"))

DNIIMG_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("DNIIMG_DEBUG_LOGGING_DISABLED"))
DNIIMG_DEBUG_LOG_FILE = os.environ.get(
    "DNIIMG_DEBUG_LOG_FILE", os.path.join(DNIIMG_PLATFORM_DIRS.user_log_dir, "debug.log")
)
