#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, Optional, TypeVar, Union

import click

from dniimg import __version__ as dniimg_version
from dniimg.apps.utils.utils import EXIT_FAILURE

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])
logger = logging.getLogger(__name__)


class DniImgCommand(click.Command):
    """Click command reporting every usage error with exit status 1."""

    def make_context(
        self,
        info_name: Optional[str],
        args: list[str],
        parent: Optional[click.Context] = None,
        **extra: Any,
    ) -> click.Context:
        """Create the context, command line parsing errors exit with status 1.

        :param info_name: Name of the command as invoked.
        :param args: Command line arguments.
        :param parent: Parent context.
        :param extra: Extra context settings.
        :return: Click context.
        """
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = EXIT_FAILURE
            raise


def dniimg_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets -h/--help, --version; provides: `log_level: int` for logging.
    The short forms -v and -vv are left to the application.

    :return: click decorator
    """
    options = click.help_option("-h", "--help")(options)
    options = click.version_option(dniimg_version, "--version")(options)
    options = click.option(
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def dniimg_config_option(
    required: bool = False,
    help: Optional[str] = None,  # pylint: disable=redefined-builtin
) -> Callable:
    """Click decorator handling config files.

    Provides: `config: str` a full path to config file.

    :param required: Config file is required
    :param help: Customized help message, defaults to None
    :return: Click decorator.
    """

    def decorator(func: Callable[[FC], FC]) -> Callable[[FC], FC]:
        func = click.option(
            "-c",
            "--config",
            type=click.Path(resolve_path=True, exists=True, dir_okay=False),
            required=required,
            help=help or "Path to the YAML/JSON configuration file.",
        )(func)
        return func

    return decorator
