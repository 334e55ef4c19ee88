# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for the runtime comparison summary."""

from datetime import datetime, timezone

import orjson

from benchreport.common.metric_keys import (
    AVG_FIELD,
    FAILURE_METRIC,
    LATENCY_METRIC,
    P95_FIELD,
    RATE_FIELD,
    SCENARIO_METRIC_KEYS,
    THROUGHPUT_METRIC,
)
from benchreport.exporters.base_exporter import ReportBaseExporter
from benchreport.report.formatting import round_number
from benchreport.report.rankings import compute_rankings
from benchreport.report.renderer import is_error_flagged, success_rate

JSON_SUMMARY_FILE_NAME = "benchmark-summary.json"


class JsonSummaryExporter(ReportBaseExporter):
    """Exports the comparison summary to JSON.

    Output structure:
    {
        "generated_at": "2024-01-01T12:00:00",
        "results_dir": "results",
        "error_rate_threshold": 0.01,
        "best": {"fastest": 2000.0, "most_efficient": 5.0},
        "runtimes": {"swoole": {...}, ...},
        "scenarios": {"health_check": {...}, ...}
    }

    Numbers are rounded exactly like the values shown in the HTML report.
    Missing values are written as null.
    """

    def get_file_name(self) -> str:
        """Return JSON file name.

        Returns:
            str: "benchmark-summary.json"
        """
        return JSON_SUMMARY_FILE_NAME

    def _generate_content(self) -> str:
        rankings = compute_rankings(self._comparison)

        runtimes = {}
        for label, artifact in self._comparison.items():
            error_rate = artifact.value(FAILURE_METRIC, RATE_FIELD)
            runtimes[label] = {
                "source": artifact.source,
                "captured_at": datetime.fromtimestamp(
                    artifact.captured_at, tz=timezone.utc
                ).isoformat(),
                "throughput_rps": round_number(
                    artifact.value(THROUGHPUT_METRIC, RATE_FIELD)
                ),
                "avg_latency_ms": round_number(artifact.value(LATENCY_METRIC, AVG_FIELD)),
                "p95_latency_ms": round_number(artifact.value(LATENCY_METRIC, P95_FIELD)),
                "error_rate": round_number(error_rate, decimals=4),
                "success_rate_pct": round_number(
                    None if error_rate is None else success_rate(error_rate) * 100
                ),
                "error_flagged": is_error_flagged(
                    error_rate, self._config.error_rate_threshold
                ),
                "badges": [badge.value for badge in rankings.badges_for(label)],
            }

        scenarios = {}
        for scenario in SCENARIO_METRIC_KEYS:
            scenarios[scenario.workload] = {
                "title": scenario.title,
                "metric": scenario.metric,
                "avg_ms": {
                    label: round_number(artifact.value(scenario.metric, AVG_FIELD))
                    for label, artifact in self._comparison.items()
                },
            }

        output = {
            "generated_at": self._exporter_config.generated_at.isoformat(),
            "results_dir": str(self._config.results_dir),
            "error_rate_threshold": self._config.error_rate_threshold,
            "best": {
                badge.value: round_number(value)
                for badge, value in rankings.best.items()
            },
            "runtimes": runtimes,
            "scenarios": scenarios,
        }

        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"
