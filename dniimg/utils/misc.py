#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG miscellaneous utilities and helper functions.

File loading and storing, configuration loading and a few formatting helpers
shared by the library and the command line tool.

Paths are used exactly as given: no separator conversion, no search in other
directories and no creation of missing directories.
"""

import contextlib
import json
import logging
import os
from typing import Iterator, Optional, Union

import yaml

from dniimg.exceptions import DNIImgError, DNIImgIOError

logger = logging.getLogger(__name__)


def to_bytes(value: Union[str, bytes]) -> bytes:
    """Convert text to bytes the way the OS handed it over.

    Command line arguments that are not valid UTF-8 are decoded by Python with
    the ``surrogateescape`` handler; encoding back with the same handler
    restores the original bytes.

    :param value: Text or bytes.
    :return: Bytes representation of the value.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return value.encode("utf-8", errors="surrogateescape")


def extend_block(data: bytes, length: int, padding: int = 0) -> bytes:
    """Extend binary data block with padding to reach specified length.

    :param data: Binary block to be extended.
    :param length: Requested block length; must be >= current block length.
    :param padding: 8-bit value to be used as padding (default: 0).
    :return: Block extended with padding bytes.
    :raises DNIImgError: When the length is smaller than current block length.
    """
    current_len = len(data)
    if length < current_len:
        raise DNIImgError("Incorrect length")
    num_padding = length - current_len
    if not num_padding:
        return data
    return data + bytes([padding]) * num_padding


def load_binary(path: str) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb")
    assert isinstance(data, bytes)
    return data


def load_text(path: str) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r")
    assert isinstance(text, str)
    return text


def load_file(path: str, mode: str = "r") -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :raises DNIImgIOError: The file cannot be opened or read.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    try:
        f = open(path, mode, encoding=encoding)  # pylint: disable=consider-using-with
    except OSError as exc:
        raise DNIImgIOError(f'could not open "{path}" for reading: {exc.strerror}') from exc
    with f:
        try:
            return f.read()
        except OSError as exc:
            raise DNIImgIOError(f"unable to read from file {path}: {exc.strerror}") from exc


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
    remove_on_error: bool = False,
) -> int:
    """Write data to a file.

    The file is created or truncated and the data are written in one block.
    The parent directory must exist.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding ('ascii', 'utf-8'), defaults to 'utf-8'.
    :param remove_on_error: Delete the file when writing fails after it was opened.
    :raises DNIImgIOError: The file cannot be opened or written.
    :raises DNIImgError: When only part of the data was written.
    :return: Number of characters or bytes written to the file.
    """
    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    try:
        # pylint: disable=consider-using-with
        f = open(path, mode, encoding=None if "b" in mode else encoding)
    except OSError as exc:
        raise DNIImgIOError(f'could not open "{path}" for writing: {exc.strerror}') from exc

    guard = remove_file_on_error(path) if remove_on_error else contextlib.nullcontext()
    with guard:
        with f:
            try:
                written = f.write(data)
            except OSError as exc:
                raise DNIImgIOError(f"unable to write to file {path}: {exc.strerror}") from exc
            if written != len(data):
                raise DNIImgError(f"Only {written} of {len(data)} bytes written into {path}")
    return written


@contextlib.contextmanager
def remove_file_on_error(path: str) -> Iterator[None]:
    # pylint: disable=missing-yield-doc
    """Execute the block and delete the file at path if the block fails.

    The file is left untouched when the block completes.

    :param path: Path to the file produced by the block.
    :return: Iterator for context manager usage.
    """
    try:
        yield
    except BaseException:
        if os.path.isfile(path):
            logger.debug(f"Removing incomplete file {path}")
            try:
                os.remove(path)
            except OSError as exc:
                logger.warning(f"Unable to remove incomplete file {path}: {exc.strerror}")
        raise


def size_fmt(num: Union[float, int], use_kibibyte: bool = True) -> str:
    """Format byte size into human-readable string representation.

    :param num: The byte size value to format.
    :param use_kibibyte: If True, use binary prefixes (1024-based) with 'iB' suffix,
                         if False, use decimal prefixes (1000-based) with 'B' suffix.
    :return: Formatted size string with value and unit (e.g., "1.5 MiB", "1024 B").
    """
    base, suffix = [(1000.0, "B"), (1024.0, "iB")][use_kibibyte]
    i = "B"
    for i in ["B"] + [i + suffix for i in list("kMGTP")]:
        if num < base:
            break
        num /= base

    return f"{int(num)} {i}" if i == "B" else f"{num:3.1f} {i}"


def load_configuration(path: str) -> dict:
    """Load configuration from YAML or JSON file.

    The content is parsed as JSON first, YAML is used as a fallback.

    :param path: Path to configuration file.
    :raises DNIImgError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path)
    except (DNIImgError, UnicodeDecodeError) as exc:
        raise DNIImgError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except yaml.YAMLError:
            pass

    if not config_data:
        raise DNIImgError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise DNIImgError(f"Invalid configuration file: {path}")

    return config_data


def to_printable(value: Union[str, bytes]) -> str:
    """Convert text or bytes into a string safe for display.

    Bytes that are not valid UTF-8 are shown as the replacement character.

    :param value: Text or bytes.
    :return: Displayable string.
    """
    return to_bytes(value).decode("utf-8", errors="replace")
