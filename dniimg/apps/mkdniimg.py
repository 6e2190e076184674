#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script for building DNI firmware images."""

import dataclasses
import logging
import os
import sys
from typing import Optional

import click

from dniimg.apps.utils import dniimg_logger
from dniimg.apps.utils.common_cli_options import (
    DniImgCommand,
    dniimg_apps_common_options,
    dniimg_config_option,
)
from dniimg.apps.utils.utils import DNIImgUsageError, catch_dniimg_error, format_raw_data
from dniimg.exceptions import DNIImgIOError
from dniimg.image.dni_image import EncodingRequest, ImageEncoder
from dniimg.image.header import DEFAULT_VERSION
from dniimg.utils.config import Config
from dniimg.utils.misc import load_binary, size_fmt, write_file

logger = logging.getLogger(__name__)


def load_payload(input_file: str) -> bytes:
    """Read the whole firmware payload.

    :param input_file: Path to the firmware file, used as given.
    :raises DNIImgIOError: The file cannot be inspected, opened or fully read.
    :return: Payload bytes.
    """
    try:
        file_size = os.stat(input_file).st_size
    except OSError as exc:
        raise DNIImgIOError(f"stat failed on {input_file}: {exc.strerror}") from exc
    logger.info(f"Input file {input_file}: {size_fmt(file_size)}")
    payload = load_binary(input_file)
    if len(payload) != file_size:
        raise DNIImgIOError(
            f"unable to read from file {input_file}: {len(payload)} of {file_size} bytes read"
        )
    return payload


def store_image(image: bytes, output_file: str) -> None:
    """Write the image, an incomplete output file is removed.

    The output directory is not created, it must exist.

    :param image: Image bytes.
    :param output_file: Path to the output file, used as given.
    :raises DNIImgIOError: The file cannot be opened or written.
    """
    write_file(image, output_file, mode="wb", remove_on_error=True)


@click.command(name="mkdniimg", cls=DniImgCommand)
@dniimg_apps_common_options
@click.option(
    "-B",
    "--board",
    "board_id",
    type=str,
    metavar="BOARD",
    help="Create image for the board specified with BOARD.",
)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.Path(dir_okay=False),
    metavar="FILE",
    help="Read input from the file FILE.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    metavar="FILE",
    help="Write output to the file FILE.",
)
@click.option(
    "-v",
    "--image-version",
    "version",
    type=str,
    metavar="VERSION",
    help=f"Set image version to VERSION. [default: {DEFAULT_VERSION}]",
)
@click.option(
    "-r",
    "--region",
    type=str,
    metavar="REGION",
    help="Set image region to REGION. [default: empty]",
)
@click.option(
    "-H",
    "--hd-id",
    "hardware_id",
    type=str,
    metavar="HD_ID",
    help="Set image hardware id to HD_ID.",
)
@dniimg_config_option(
    help="Path to the YAML/JSON configuration file with 'board', 'version', 'region' "
    "and 'hardware_id' keys. Command line options take precedence."
)
def main(
    log_level: int,
    board_id: Optional[str],
    input_file: Optional[str],
    output_file: Optional[str],
    version: Optional[str],
    region: Optional[str],
    hardware_id: Optional[str],
    config: Optional[str],
) -> int:
    """DNI firmware image builder.

    Prepends the 128-byte DNI header and appends the checksum byte to the
    firmware. Images for PINEAPPLE_TETRA and WNDR4300 are copied unchanged.
    """
    dniimg_logger.install(level=log_level)

    settings = Config.create_from_file(config) if config else Config()
    for key, value in (
        ("board", board_id),
        ("version", version),
        ("region", region),
        ("hardware_id", hardware_id),
    ):
        if value is not None:
            settings[key] = value

    if not settings.get("board"):
        raise DNIImgUsageError("no board specified")
    if not input_file:
        raise DNIImgUsageError("no input file specified")
    if not output_file:
        raise DNIImgUsageError("no output file specified")

    request = EncodingRequest.load_from_config(settings)
    request = dataclasses.replace(request, payload=load_payload(input_file))

    encoder = ImageEncoder(request)
    logger.info(str(encoder))
    if encoder.header is not None:
        logger.debug(f"DNI header:\n{format_raw_data(encoder.header.export())}")
    image = encoder.export()

    store_image(image, output_file)
    click.echo(f"Success. (DNI image: {output_file} created, {size_fmt(len(image))})")
    return 0


@catch_dniimg_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
