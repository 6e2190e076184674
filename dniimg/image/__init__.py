#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNI firmware image building."""

from dniimg.image.boards import SPECIAL_BOARDS, is_special_board
from dniimg.image.checksum import calc_checksum
from dniimg.image.dni_image import EncodingRequest, ImageEncoder, encode_image
from dniimg.image.header import DEFAULT_VERSION, DNI_HEADER_SIZE, DniHeader

__all__ = [
    "DEFAULT_VERSION",
    "DNI_HEADER_SIZE",
    "SPECIAL_BOARDS",
    "DniHeader",
    "EncodingRequest",
    "ImageEncoder",
    "calc_checksum",
    "encode_image",
    "is_special_board",
]
