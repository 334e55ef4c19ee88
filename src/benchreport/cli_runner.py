# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from pathlib import Path

from rich.console import Console

from benchreport.cli_utils import raise_fatal_error_and_exit
from benchreport.collector import ComparisonSet, ResultCollector
from benchreport.common.config import ReportConfig
from benchreport.common.exceptions import NoDataError, OutputWriteError
from benchreport.common.logging import setup_rich_logging
from benchreport.common.metric_keys import FAILURE_METRIC, RATE_FIELD
from benchreport.exporters import (
    ConsoleSummaryExporter,
    HtmlReportExporter,
    JsonSummaryExporter,
    ReportExporterConfig,
)
from benchreport.report import format_percent, is_error_flagged

logger = logging.getLogger(__name__)


def run_report(config: ReportConfig, console: Console | None = None) -> Path:
    """Collect the latest results and write the report.

    Exits the process with status 1 when no result file could be used or the
    report cannot be written.

    Args:
        config: Report configuration
        console: Console for the summary table; defaults to stdout

    Returns:
        Path of the written HTML report
    """
    setup_rich_logging(config)

    try:
        comparison = ResultCollector(
            config.results_dir, config.runtimes, config.file_extension
        ).collect()
    except NoDataError as e:
        raise_fatal_error_and_exit(str(e))

    missing = [label for label in config.runtimes if label not in comparison]
    if missing:
        logger.warning(f"No usable results for: {', '.join(missing)}")
    _warn_flagged_runtimes(comparison, config)

    try:
        report_path = _export_report(comparison, config)
    except OutputWriteError as e:
        raise_fatal_error_and_exit(str(e))
    except Exception:
        logger.exception("Error generating benchmark report")
        raise

    ConsoleSummaryExporter(comparison, config).export(console or Console())
    logger.info(f"Report generated: {report_path}")
    return report_path


def _warn_flagged_runtimes(comparison: ComparisonSet, config: ReportConfig) -> None:
    threshold = config.error_rate_threshold
    for label, artifact in comparison.items():
        error_rate = artifact.value(FAILURE_METRIC, RATE_FIELD)
        if is_error_flagged(error_rate, threshold):
            logger.warning(
                f"Runtime '{label}' error rate {format_percent(error_rate)} "
                f"is above {format_percent(threshold)}"
            )


def _export_report(comparison: ComparisonSet, config: ReportConfig) -> Path:
    """Write the HTML report and, when enabled, the JSON summary."""
    exporter_config = ReportExporterConfig(
        comparison=comparison,
        config=config,
        output_dir=config.output_dir,
        generated_at=config.resolve_generated_at(),
    )

    report_path = HtmlReportExporter(exporter_config).export()

    if config.export_summary_json:
        summary_path = JsonSummaryExporter(exporter_config).export()
        logger.info(f"Summary JSON written to: {summary_path}")

    return report_path
