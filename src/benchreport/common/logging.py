# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.console import Console
from rich.logging import RichHandler

from benchreport.common.config import ReportConfig

_PACKAGE_LOGGER = "benchreport"


def setup_rich_logging(config: ReportConfig, console: Console | None = None) -> None:
    """Route the package loggers through a single RichHandler.

    Calling this more than once replaces the previously installed handler
    rather than stacking a new one.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(config.log_level.upper())
    logger.propagate = False
