# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTML exporter for the runtime comparison report."""

from benchreport.exporters.base_exporter import ReportBaseExporter
from benchreport.report.renderer import ReportRenderer

HTML_REPORT_FILE_NAME = "benchmark-report.html"


class HtmlReportExporter(ReportBaseExporter):
    """Exports the comparison as a self-contained HTML report.

    The document holds the summary cards with their badges, the per-scenario
    latency table, and the chart data that Chart.js draws in the browser.
    """

    def get_file_name(self) -> str:
        """Return HTML file name.

        Returns:
            str: "benchmark-report.html"
        """
        return HTML_REPORT_FILE_NAME

    def _generate_content(self) -> str:
        renderer = ReportRenderer(self._config)
        return renderer.render(
            self._comparison, generated_at=self._exporter_config.generated_at
        )
