# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Typed values handed to the report template."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class BadgeView:
    key: str
    text: str


@dataclass(frozen=True, slots=True)
class RuntimeCard:
    """Summary card for one runtime.

    Attributes:
        label: Runtime label
        color: Heading color
        source: Result file the numbers come from
        throughput: Requests per second, formatted
        avg_latency: Average request duration in ms, formatted
        p95_latency: 95th percentile request duration in ms, formatted
        success_rate: Share of successful requests, formatted as a percentage
        error_rate: Raw failure ratio, None if not reported
        error_flagged: Whether the failure ratio is above the warning threshold
        badges: Badges earned by this runtime
    """

    label: str
    color: str
    source: str
    throughput: str
    avg_latency: str
    p95_latency: str
    success_rate: str
    error_rate: float | None
    error_flagged: bool
    badges: tuple[BadgeView, ...] = ()


@dataclass(frozen=True, slots=True)
class ScenarioCell:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class ScenarioRow:
    workload: str
    title: str
    description: str
    cells: tuple[ScenarioCell, ...]


@dataclass(frozen=True, slots=True)
class ReportContext:
    """Everything the report template renders."""

    title: str
    generated_on: str
    results_dir: str
    labels: tuple[str, ...]
    colors: dict[str, str]
    cards: tuple[RuntimeCard, ...]
    scenario_rows: tuple[ScenarioRow, ...]
    chart_payload: dict[str, Any] = field(default_factory=dict)
