# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTML rendering of a ComparisonSet."""

from datetime import datetime
from typing import Any

import orjson
from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from benchreport.collector.models import ComparisonSet
from benchreport.common.config import ReportConfig
from benchreport.common.metric_keys import (
    AVG_FIELD,
    FAILURE_METRIC,
    LATENCY_METRIC,
    P95_FIELD,
    RATE_FIELD,
    SCENARIO_METRIC_KEYS,
    THROUGHPUT_METRIC,
    ScenarioMetricKey,
)
from benchreport.report.formatting import (
    format_number,
    format_percent,
    round_number,
)
from benchreport.report.rankings import Rankings, compute_rankings
from benchreport.report.view_models import (
    BadgeView,
    ReportContext,
    RuntimeCard,
    ScenarioCell,
    ScenarioRow,
)


__all__ = [
    "GENERATED_ON_FORMAT",
    "REPORT_TEMPLATE",
    "ReportRenderer",
    "is_error_flagged",
    "success_rate",
]

REPORT_TEMPLATE = "report.html.j2"
GENERATED_ON_FORMAT = "%Y-%m-%d %H:%M:%S"


def _dumps_json(obj: Any, **kwargs: Any) -> str:
    # Keys keep insertion order so the charts follow the comparison order.
    return orjson.dumps(obj).decode("utf-8")


def _create_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("benchreport.report", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.policies["json.dumps_function"] = _dumps_json
    env.policies["json.dumps_kwargs"] = {}
    return env


def success_rate(error_rate: float | None) -> float | None:
    """Return ``1 - error_rate``, or None when the error rate is unknown."""
    if error_rate is None:
        return None
    return 1 - error_rate


def is_error_flagged(error_rate: float | None, threshold: float) -> bool:
    """Return True when the error rate is strictly above the threshold."""
    return error_rate is not None and error_rate > threshold


class ReportRenderer:
    """Renders a ComparisonSet into a self-contained HTML document.

    Missing metrics and fields never abort rendering: they show as "N/A" in
    the cards and tables and as null in the chart data. Runtimes without a
    configured color get a stable fallback color.

    Args:
        config: Report configuration (title, colors, error rate threshold)
        scenarios: Workload to metric table used for the latency breakdown
    """

    def __init__(
        self,
        config: ReportConfig,
        scenarios: tuple[ScenarioMetricKey, ...] = SCENARIO_METRIC_KEYS,
    ):
        self.config = config
        self.scenarios = scenarios
        self._env = _create_environment()

    def render(
        self, comparison: ComparisonSet, generated_at: datetime | None = None
    ) -> str:
        """Render the report.

        Args:
            comparison: Runtimes to compare
            generated_at: Timestamp printed in the header; defaults to the
                configured or current time

        Returns:
            The complete HTML document
        """
        context = self.build_context(comparison, generated_at)
        template = self._env.get_template(REPORT_TEMPLATE)
        return template.render(report=context)

    def build_context(
        self, comparison: ComparisonSet, generated_at: datetime | None = None
    ) -> ReportContext:
        if generated_at is None:
            generated_at = self.config.resolve_generated_at()

        rankings = compute_rankings(comparison)
        colors = {label: self.config.color_for(label) for label in comparison.labels}

        return ReportContext(
            title=self.config.title,
            generated_on=generated_at.strftime(GENERATED_ON_FORMAT),
            results_dir=str(self.config.results_dir),
            labels=tuple(comparison.labels),
            colors=colors,
            cards=self._build_cards(comparison, rankings, colors),
            scenario_rows=self._build_scenario_rows(comparison),
            chart_payload=self._build_chart_payload(comparison, colors),
        )

    def _build_cards(
        self,
        comparison: ComparisonSet,
        rankings: Rankings,
        colors: dict[str, str],
    ) -> tuple[RuntimeCard, ...]:
        cards = []
        for label, artifact in comparison.items():
            error_rate = artifact.value(FAILURE_METRIC, RATE_FIELD)
            flagged = is_error_flagged(error_rate, self.config.error_rate_threshold)
            cards.append(
                RuntimeCard(
                    label=label,
                    color=colors[label],
                    source=artifact.source,
                    throughput=format_number(
                        artifact.value(THROUGHPUT_METRIC, RATE_FIELD)
                    ),
                    avg_latency=format_number(artifact.value(LATENCY_METRIC, AVG_FIELD)),
                    p95_latency=format_number(artifact.value(LATENCY_METRIC, P95_FIELD)),
                    success_rate=format_percent(success_rate(error_rate)),
                    error_rate=error_rate,
                    error_flagged=flagged,
                    badges=tuple(
                        BadgeView(key=badge.value, text=badge.display_name)
                        for badge in rankings.badges_for(label)
                    ),
                )
            )
        return tuple(cards)

    def _build_scenario_rows(self, comparison: ComparisonSet) -> tuple[ScenarioRow, ...]:
        return tuple(
            ScenarioRow(
                workload=scenario.workload,
                title=scenario.title,
                description=scenario.description,
                cells=tuple(
                    ScenarioCell(
                        label=label,
                        value=format_number(artifact.value(scenario.metric, AVG_FIELD)),
                    )
                    for label, artifact in comparison.items()
                ),
            )
            for scenario in self.scenarios
        )

    def _build_chart_payload(
        self, comparison: ComparisonSet, colors: dict[str, str]
    ) -> dict[str, Any]:
        """Chart data for the client-side bar charts.

        The series are rounded the same way as the displayed numbers; the full
        metric values are embedded unrounded under "metrics".
        """
        return {
            "labels": comparison.labels,
            "colors": colors,
            "series": {
                "throughput": [
                    round_number(artifact.value(THROUGHPUT_METRIC, RATE_FIELD))
                    for artifact in comparison.artifacts.values()
                ],
                "p95": [
                    round_number(artifact.value(LATENCY_METRIC, P95_FIELD))
                    for artifact in comparison.artifacts.values()
                ],
            },
            "metrics": {
                label: {
                    name: summary.to_values() for name, summary in artifact.metrics.items()
                }
                for label, artifact in comparison.items()
            },
        }
