#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNI image checksum."""

from typing import Union

CHECKSUM_SIZE = 1


def calc_checksum(data: Union[bytes, bytearray, memoryview]) -> int:
    """Calculate the one-byte checksum of the data.

    The checksum is the one's complement of the 8-bit wrap-around sum of all
    bytes, so the sum of the data together with the checksum is always 0xFF.

    :param data: Header and payload bytes.
    :return: Checksum value in range 0..255.
    """
    return 0xFF - (sum(data) & 0xFF)
