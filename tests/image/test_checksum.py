#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the DNI image checksum."""

import pytest

from dniimg.image.checksum import calc_checksum


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"", 0xFF),
        (b"\x00", 0xFF),
        (b"\x01", 0xFE),
        (b"\xff", 0x00),
        (b"\xff\x01", 0xFF),
        (b"\x80\x80\x01", 0xFE),
        (b"\xff" * 256, 0xFF),
        (b"\xde\xad\xbe\xef", 0xFF - ((0xDE + 0xAD + 0xBE + 0xEF) & 0xFF)),
    ],
)
def test_calc_checksum(data: bytes, expected: int) -> None:
    assert calc_checksum(data) == expected


def test_checksum_completes_sum() -> None:
    """Data followed by its checksum always sums up to 0xFF modulo 256."""
    for length in (1, 7, 128, 1000):
        data = bytes((i * 31 + 7) & 0xFF for i in range(length))
        assert (sum(data) + calc_checksum(data)) & 0xFF == 0xFF


def test_checksum_accepts_memoryview() -> None:
    data = bytearray(b"\x10\x20\x30")
    assert calc_checksum(memoryview(data)[:2]) == 0xFF - 0x30
