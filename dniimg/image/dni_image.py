#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNI firmware image encoder.

Image layout for regular boards::

    +--------------------+ 0x00
    | DNI header (128 B) |
    +--------------------+ 0x80
    | payload            |
    +--------------------+ 0x80 + len(payload)
    | checksum (1 B)     |
    +--------------------+

Special boards (see :mod:`dniimg.image.boards`) get the payload unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from typing_extensions import Self

from dniimg.exceptions import DNIImgAllocationError, DNIImgValueError
from dniimg.image.boards import is_special_board
from dniimg.image.checksum import CHECKSUM_SIZE, calc_checksum
from dniimg.image.header import DEFAULT_VERSION, DNI_HEADER_SIZE, DniHeader
from dniimg.utils.abstract import BaseClass
from dniimg.utils.config import Config
from dniimg.utils.misc import to_printable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodingRequest:
    """Input of one image encoding."""

    board_id: str
    version: str = DEFAULT_VERSION
    region: str = ""
    hardware_id: Optional[str] = None
    payload: bytes = b""

    def __post_init__(self) -> None:
        """Validate the request.

        :raises DNIImgValueError: If the board identifier is empty.
        """
        if not self.board_id:
            raise DNIImgValueError("Board identifier must not be empty")

    @property
    def is_special(self) -> bool:
        """The board takes the payload without header and checksum."""
        return is_special_board(self.board_id)

    @classmethod
    def get_validation_schema(cls) -> dict[str, Any]:
        """Get validation schema of the image configuration.

        :return: JSON schema of the configuration.
        """
        return {
            "type": "object",
            "title": "DNI image settings",
            "properties": {
                "board": {"type": "string", "minLength": 1, "title": "Board identifier"},
                "version": {"type": "string", "title": "Image version"},
                "region": {"type": "string", "title": "Image region"},
                "hardware_id": {"type": "string", "title": "Hardware ID"},
            },
            "required": ["board"],
            "additionalProperties": False,
        }

    @classmethod
    def load_from_config(cls, config: Config, payload: bytes = b"") -> Self:
        """Create the request from configuration.

        :param config: Image configuration with 'board' and optional 'version',
            'region' and 'hardware_id' keys.
        :param payload: Firmware payload.
        :return: Encoding request.
        """
        config.check([cls.get_validation_schema()])
        hardware_id = config.get("hardware_id")
        return cls(
            board_id=config.get_str("board"),
            version=config.get_str("version", DEFAULT_VERSION),
            region=config.get_str("region", ""),
            hardware_id=None if hardware_id is None else str(hardware_id),
            payload=payload,
        )


class ImageEncoder(BaseClass):
    """DNI image encoder."""

    def __init__(self, request: EncodingRequest) -> None:
        """Constructor.

        :param request: Encoding request.
        """
        self.request = request
        self.header: Optional[DniHeader] = None
        if not request.is_special:
            self.header = DniHeader(
                board_id=request.board_id,
                version=request.version,
                region=request.region,
                hardware_id=request.hardware_id,
            )

    @property
    def size(self) -> int:
        """Size of the exported image in bytes."""
        if self.header is None:
            return len(self.request.payload)
        return DNI_HEADER_SIZE + len(self.request.payload) + CHECKSUM_SIZE

    def export(self) -> bytes:
        """Build the image.

        :raises DNIImgAllocationError: The output buffer cannot be allocated.
        :return: Image bytes.
        """
        payload = self.request.payload
        if self.header is None:
            logger.debug(f"Board {self.request.board_id} is special, no header is added")
            return bytes(payload)

        payload_offset = DNI_HEADER_SIZE
        checksum_offset = payload_offset + len(payload)
        try:
            image = bytearray(self.size)
        except MemoryError as exc:
            raise DNIImgAllocationError(f"No memory for buffer of {self.size} bytes") from exc

        image[:payload_offset] = self.header.export()
        image[payload_offset:checksum_offset] = payload
        checksum = calc_checksum(memoryview(image)[:checksum_offset])
        image[checksum_offset] = checksum
        logger.debug(f"Image checksum: 0x{checksum:02X}")
        return bytes(image)

    @classmethod
    def encode(cls, request: EncodingRequest) -> bytes:
        """Encode the request into the image.

        :param request: Encoding request.
        :return: Image bytes.
        """
        return cls(request).export()

    def __repr__(self) -> str:
        return f"ImageEncoder({self.request.board_id!r})"

    def __str__(self) -> str:
        """Get info of the image."""
        ret = "DNI Image:\n"
        ret += f" Board:            {to_printable(self.request.board_id)}\n"
        ret += f" Payload size:     {len(self.request.payload)} B\n"
        ret += f" Image size:       {self.size} B\n"
        if self.header is None:
            ret += " Header:           none (special board)\n"
        else:
            ret += str(self.header)
        return ret


def encode_image(request: EncodingRequest) -> bytes:
    """Encode the request into the DNI image.

    :param request: Encoding request.
    :return: Image bytes.
    """
    return ImageEncoder.encode(request)
