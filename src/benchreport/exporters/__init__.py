# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters writing the comparison report to disk or the console."""

from benchreport.exporters.base_exporter import ReportBaseExporter
from benchreport.exporters.console_summary_exporter import ConsoleSummaryExporter
from benchreport.exporters.exporter_config import ReportExporterConfig
from benchreport.exporters.html_report_exporter import (
    HTML_REPORT_FILE_NAME,
    HtmlReportExporter,
)
from benchreport.exporters.json_summary_exporter import (
    JSON_SUMMARY_FILE_NAME,
    JsonSummaryExporter,
)

__all__ = [
    "ConsoleSummaryExporter",
    "HTML_REPORT_FILE_NAME",
    "HtmlReportExporter",
    "JSON_SUMMARY_FILE_NAME",
    "JsonSummaryExporter",
    "ReportBaseExporter",
    "ReportExporterConfig",
]
