#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any

import pytest

os.environ["DNIIMG_DEBUG_LOGGING_DISABLED"] = "True"

from tests.cli_runner import CliRunner  # pylint: disable=wrong-import-position


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def firmware() -> bytes:
    """Firmware payload used across the tests.

    :return: 1 KiB of incrementing bytes.
    """
    return bytes(i & 0xFF for i in range(1024))
