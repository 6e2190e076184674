#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""DNIIMG schema-based configuration validation utilities."""

import copy
import json
import logging
from typing import Any

import fastjsonschema
from deepmerge import always_merger

from dniimg import DNIIMG_DEBUG
from dniimg.exceptions import DNIImgError

ENABLE_DEBUG = DNIIMG_DEBUG

logger = logging.getLogger(__name__)


def _print_validation_fail_reason(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Format JSON schema validation failure into human-readable error message.

    :param exc: The JSON schema validation exception to process.
    :return: Formatted error message explaining the validation failure reason.
    """
    message = str(exc)
    if exc.rule == "required":
        missing = filter(lambda x: x not in exc.value.keys(), exc.rule_definition)
        message += f"; Missing field(s): {', '.join(missing)}"
    elif exc.rule == "additionalProperties":
        known = exc.definition.get("properties", {}).keys()
        unknown = [key for key in exc.value.keys() if key not in known]
        message += f"; Unknown field(s): {', '.join(unknown)}"
    return message


def check_config(config: dict[str, Any], schemas: list[dict[str, Any]]) -> None:
    """Check the configuration by provided list of validation schemas.

    The schemas are merged together before the validation.

    :param config: Configuration dictionary to validate.
    :param schemas: List of JSON schema dictionaries for validation.
    :raises DNIImgError: Invalid validation schema or configuration validation failed.
    """
    schema: dict[str, Any] = {}
    for sch in schemas:
        always_merger.merge(schema, copy.deepcopy(sch))

    try:
        validator = fastjsonschema.compile(schema)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise DNIImgError(f"Invalid validation schema to check config: {str(exc)}") from exc
    if ENABLE_DEBUG:
        logger.debug(f"Merged validation schema:\n{json.dumps(schema, indent=2)}")
        logger.debug(f"Configuration to check:\n{json.dumps(config, indent=2, default=str)}")
    try:
        validator(copy.deepcopy(config))
    except fastjsonschema.JsonSchemaValueException as exc:
        message = _print_validation_fail_reason(exc)
        raise DNIImgError(f"Configuration validation failed: {message}") from exc
    logger.debug("Configuration has been validated")
