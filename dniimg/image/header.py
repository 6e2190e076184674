#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNI image header.

The header is a fixed 128-byte block of ``key:value`` text lines followed by
zero padding::

    device:<board>\\n
    version:V<version>\\n
    region:<region>\\n
    hd_id:<hardware id>\\n      (optional)

The text is written with bounded formatting: one byte of the block is always
reserved for the terminating zero, so at most 127 bytes of text are stored.
The ``hd_id`` line is written only when more than one byte remains after the
first three lines, otherwise it is dropped without any error.
"""

import logging
from typing import Optional, Union

from dniimg.exceptions import DNIImgValueError
from dniimg.utils.abstract import BaseClass
from dniimg.utils.misc import extend_block, to_bytes, to_printable

logger = logging.getLogger(__name__)

DNI_HEADER_SIZE = 128
DEFAULT_VERSION = "1.00.00"


def bounded_format(text: bytes, capacity: int) -> bytes:
    """Store text into a buffer of given capacity, keeping room for the terminating zero.

    :param text: Formatted text.
    :param capacity: Size of the target buffer in bytes.
    :return: The part of the text that fits, at most ``capacity - 1`` bytes.
    """
    if capacity <= 0:
        return b""
    return text[: capacity - 1]


class DniHeader(BaseClass):
    """DNI image metadata header.

    :cvar SIZE: Size of the exported header in bytes.
    """

    SIZE = DNI_HEADER_SIZE

    def __init__(
        self,
        board_id: Union[str, bytes],
        version: Union[str, bytes] = DEFAULT_VERSION,
        region: Union[str, bytes] = "",
        hardware_id: Optional[Union[str, bytes]] = None,
    ) -> None:
        """Constructor.

        :param board_id: Board identifier, must not be empty
        :param version: Image version, stored with "V" prefix
        :param region: Image region
        :param hardware_id: Hardware id; None means the hd_id line is omitted
        :raises DNIImgValueError: If the board identifier is empty
        """
        if not board_id:
            raise DNIImgValueError("Board identifier must not be empty")
        self.board_id = board_id
        self.version = version
        self.region = region
        self.hardware_id = hardware_id

    @property
    def prefix(self) -> bytes:
        """Device, version and region lines before any truncation."""
        return (
            b"device:"
            + to_bytes(self.board_id)
            + b"\nversion:V"
            + to_bytes(self.version)
            + b"\nregion:"
            + to_bytes(self.region)
            + b"\n"
        )

    @property
    def hd_id_line(self) -> Optional[bytes]:
        """Hardware id line before any truncation, None without hardware id."""
        if self.hardware_id is None:
            return None
        return b"hd_id:" + to_bytes(self.hardware_id) + b"\n"

    @property
    def written(self) -> int:
        """Number of bytes stored by the device, version and region lines."""
        return len(bounded_format(self.prefix, self.SIZE))

    @property
    def hd_id_included(self) -> bool:
        """True when the hd_id line (possibly shortened) is part of the header."""
        return self.hd_id_line is not None and self.SIZE - self.written > 1

    @property
    def text(self) -> bytes:
        """Complete header text without the zero padding."""
        text = bounded_format(self.prefix, self.SIZE)
        remaining = self.SIZE - len(text)
        hd_id_line = self.hd_id_line
        if hd_id_line is not None:
            if remaining > 1:
                text += bounded_format(hd_id_line, remaining)
            else:
                logger.debug(f"No space left for hardware id line, {remaining} byte(s) remaining")
        return text

    def export(self) -> bytes:
        """Binary representation of the header, always SIZE bytes."""
        return extend_block(self.text, self.SIZE)

    def __repr__(self) -> str:
        return (
            f"DniHeader({self.board_id!r}, {self.version!r}, "
            f"{self.region!r}, {self.hardware_id!r})"
        )

    def __str__(self) -> str:
        """Get info of the header."""
        hd_id = "-"
        if self.hardware_id is not None:
            hd_id = to_printable(self.hardware_id) + ("" if self.hd_id_included else " (omitted)")
        return (
            "DNI Header:\n"
            f" Board:            {to_printable(self.board_id)}\n"
            f" Version:          V{to_printable(self.version)}\n"
            f" Region:           {to_printable(self.region)}\n"
            f" Hardware ID:      {hd_id}\n"
            f" Text size:        {len(self.text)} B of {self.SIZE} B\n"
        )
