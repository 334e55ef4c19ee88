# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for benchreport."""

from typing import Annotated

from cyclopts import App, Parameter

from benchreport import __version__
from benchreport.common.config import ReportConfig

app = App(
    name="benchreport",
    help="Aggregate load test results per runtime into an HTML comparison report.",
    version=__version__,
)


@app.default
def generate(
    config: Annotated[ReportConfig, Parameter(name="*")] = ReportConfig(),  # noqa: B008
) -> None:
    """Generate the benchmark report from the latest result file of each runtime.

    Args:
        config: Report configuration
    """
    from benchreport.cli_runner import run_report

    run_report(config)
