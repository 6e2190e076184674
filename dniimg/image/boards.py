#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boards whose bootloader expects a headerless image."""

# case-sensitive exact names, no patterns
SPECIAL_BOARDS = frozenset(
    {
        "PINEAPPLE_TETRA",
        "WNDR4300",
    }
)


def is_special_board(board_id: str) -> bool:
    """Check whether the board takes the raw payload without header and checksum.

    :param board_id: Board identifier.
    :return: True for boards listed in SPECIAL_BOARDS.
    """
    return board_id in SPECIAL_BOARDS
