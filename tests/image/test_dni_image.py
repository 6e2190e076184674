#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the DNI image encoder."""

import dataclasses
from unittest.mock import patch

import pytest

from dniimg.exceptions import DNIImgAllocationError, DNIImgError, DNIImgValueError
from dniimg.image import (
    DNI_HEADER_SIZE,
    SPECIAL_BOARDS,
    EncodingRequest,
    ImageEncoder,
    encode_image,
    is_special_board,
)
from dniimg.utils.config import Config


def _check_checksum(image: bytes) -> None:
    assert image[-1] == 0xFF - (sum(image[:-1]) & 0xFF)


def test_special_boards() -> None:
    assert SPECIAL_BOARDS == {"PINEAPPLE_TETRA", "WNDR4300"}
    assert is_special_board("PINEAPPLE_TETRA")
    assert is_special_board("WNDR4300")


@pytest.mark.parametrize(
    "board_id", ["pineapple_tetra", "WNDR4300v2", "WNDR430", " WNDR4300", "WNDR3700v4"]
)
def test_special_boards_exact_match(board_id: str) -> None:
    assert not is_special_board(board_id)
    image = encode_image(EncodingRequest(board_id=board_id, payload=b"\x01"))
    assert len(image) == 1 + DNI_HEADER_SIZE + 1


def test_passthrough_scenario() -> None:
    payload = bytes([0xDE, 0xAD, 0xBE, 0xEF])
    request = EncodingRequest(board_id="PINEAPPLE_TETRA", payload=payload)
    assert encode_image(request) == payload


@pytest.mark.parametrize("board_id", sorted(SPECIAL_BOARDS))
def test_passthrough_ignores_metadata(board_id: str, firmware: bytes) -> None:
    request = EncodingRequest(
        board_id=board_id, version="2.00.00", region="EU", hardware_id="HW", payload=firmware
    )
    encoder = ImageEncoder(request)
    assert encoder.header is None
    assert encoder.size == len(firmware)
    assert encoder.export() == firmware


def test_passthrough_empty_payload() -> None:
    assert encode_image(EncodingRequest(board_id="WNDR4300")) == b""


def test_generic_board_scenario() -> None:
    request = EncodingRequest(
        board_id="GENERICBOARD",
        version="1.00.00",
        region="",
        hardware_id=None,
        payload=b"\x00\x01",
    )
    image = encode_image(request)
    text = b"device:GENERICBOARD\nversion:V1.00.00\nregion:\n"
    assert len(image) == 131
    assert image[: len(text)] == text
    assert image[len(text) : DNI_HEADER_SIZE] == bytes(DNI_HEADER_SIZE - len(text))
    assert image[DNI_HEADER_SIZE : DNI_HEADER_SIZE + 2] == b"\x00\x01"
    _check_checksum(image)


def test_known_checksum() -> None:
    """Header text 'device:A\\nversion:V\\nregion:\\n' sums up to 2397 (0x5D mod 256)."""
    image = encode_image(EncodingRequest(board_id="A", version=""))
    assert len(image) == DNI_HEADER_SIZE + 1
    assert image[-1] == 0xA2


def test_layout(firmware: bytes) -> None:
    request = EncodingRequest(
        board_id="R7800", version="1.0.2.68", region="NA", hardware_id="HW-ID", payload=firmware
    )
    encoder = ImageEncoder(request)
    image = encoder.export()
    assert encoder.header is not None
    assert len(image) == encoder.size == len(firmware) + DNI_HEADER_SIZE + 1
    assert image[:DNI_HEADER_SIZE] == encoder.header.export()
    assert b"hd_id:HW-ID\n" in image[:DNI_HEADER_SIZE]
    assert image[DNI_HEADER_SIZE:-1] == firmware
    _check_checksum(image)


def test_empty_payload() -> None:
    image = encode_image(EncodingRequest(board_id="GENERICBOARD"))
    assert len(image) == DNI_HEADER_SIZE + 1
    _check_checksum(image)


def test_checksum_wraps_around() -> None:
    image = encode_image(EncodingRequest(board_id="GENERICBOARD", payload=b"\xff" * 4097))
    _check_checksum(image)


def test_determinism(firmware: bytes) -> None:
    request = EncodingRequest(board_id="GENERICBOARD", region="EU", payload=firmware)
    assert encode_image(request) == encode_image(dataclasses.replace(request))
    assert ImageEncoder(request) == ImageEncoder(request)


def test_request_is_immutable() -> None:
    request = EncodingRequest(board_id="GENERICBOARD")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.board_id = "OTHER"  # type: ignore[misc]


def test_request_empty_board() -> None:
    with pytest.raises(DNIImgValueError):
        EncodingRequest(board_id="")


def test_allocation_failure() -> None:
    encoder = ImageEncoder(EncodingRequest(board_id="GENERICBOARD", payload=b"\x00"))
    with patch("dniimg.image.dni_image.bytearray", side_effect=MemoryError, create=True):
        with pytest.raises(DNIImgAllocationError):
            encoder.export()


def test_encoder_info() -> None:
    encoder = ImageEncoder(EncodingRequest(board_id="GENERICBOARD", payload=b"\x00\x01"))
    assert "GENERICBOARD" in repr(encoder)
    output = str(encoder)
    assert "Image size:       131 B" in output
    assert "DNI Header" in output
    assert "special board" in str(ImageEncoder(EncodingRequest(board_id="WNDR4300")))


def test_request_from_config() -> None:
    config = Config({"board": "GENERICBOARD", "region": "EU", "hardware_id": "HW"})
    request = EncodingRequest.load_from_config(config, payload=b"\x01")
    assert request == EncodingRequest(
        board_id="GENERICBOARD", version="1.00.00", region="EU", hardware_id="HW", payload=b"\x01"
    )


@pytest.mark.parametrize(
    "config",
    [
        {"version": "1.00.00"},
        {"board": ""},
        {"board": 10},
        {"board": "GENERICBOARD", "hardware_id": 123},
        {"board": "GENERICBOARD", "unknown": "value"},
    ],
)
def test_request_from_invalid_config(config: dict) -> None:
    with pytest.raises(DNIImgError, match="Configuration validation failed"):
        EncodingRequest.load_from_config(Config(config))
