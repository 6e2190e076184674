#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG configuration management utilities."""

import logging
from typing import Any, Optional

from typing_extensions import Self

from dniimg.exceptions import DNIImgError
from dniimg.utils.misc import load_configuration
from dniimg.utils.schema_validator import check_config

logger = logging.getLogger(__name__)


class Config(dict):
    """DNIIMG Configuration Manager.

    Dictionary of settings with typed accessors and schema validation.
    """

    @classmethod
    def create_from_file(cls, file_path: str) -> Self:
        """Create configuration object from YAML or JSON file.

        :param file_path: Path to the configuration file to load.
        :return: Configuration object with loaded data.
        """
        cfg = cls(load_configuration(file_path))
        logger.debug(f"Configuration loaded from {file_path}")
        return cfg

    def get_str(self, key: str, default: Optional[str] = None) -> str:
        """Get the key value as string.

        :param key: Key name of the configuration entry.
        :param default: Default value to return if the key doesn't exist in configuration.
        :raises DNIImgError: If the retrieved value is not a string type.
        :return: Configuration value as string.
        """
        ret = self.get(key, default)
        if not isinstance(ret, str):
            raise DNIImgError(f"The value is not string at key: {key}")
        return ret

    def check(self, schemas: list[dict[str, Any]]) -> None:
        """Check configuration against validation schemas.

        :param schemas: List of validation schemas.
        """
        check_config(self, schemas)
