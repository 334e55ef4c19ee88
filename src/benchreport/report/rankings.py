# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Best-in-class rankings across the compared runtimes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from benchreport.collector.models import ComparisonSet
from benchreport.common.metric_keys import (
    AVG_FIELD,
    LATENCY_METRIC,
    RATE_FIELD,
    THROUGHPUT_METRIC,
)


class OptimizationDirection(Enum):
    """Direction of optimization for a metric."""

    MAXIMIZE = "maximize"  # Higher is better (e.g., throughput)
    MINIMIZE = "minimize"  # Lower is better (e.g., latency)


class Badge(Enum):
    """Marker shown on a runtime's summary card."""

    FASTEST = "fastest"
    MOST_EFFICIENT = "most_efficient"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class RankingObjective(NamedTuple):
    """A metric field whose best value earns a badge.

    Args:
        badge: Badge awarded to every runtime holding the best value
        metric: Metric name (e.g. "http_reqs")
        field: Field inside the metric's values (e.g. "rate")
        direction: Whether the best value is the highest or the lowest
    """

    badge: Badge
    metric: str
    field: str
    direction: OptimizationDirection


DEFAULT_RANKING_OBJECTIVES = (
    RankingObjective(
        Badge.FASTEST, THROUGHPUT_METRIC, RATE_FIELD, OptimizationDirection.MAXIMIZE
    ),
    RankingObjective(
        Badge.MOST_EFFICIENT, LATENCY_METRIC, AVG_FIELD, OptimizationDirection.MINIMIZE
    ),
)


@dataclass(slots=True)
class Rankings:
    """Best values and the badges they award.

    Attributes:
        best: Best value per badge, None when no runtime reported the metric
        badges: Badges per runtime label, in objective order; every label of
            the comparison set is present, possibly with an empty list
    """

    best: dict[Badge, float | None] = field(default_factory=dict)
    badges: dict[str, list[Badge]] = field(default_factory=dict)

    def badges_for(self, label: str) -> list[Badge]:
        return self.badges.get(label, [])


def compute_rankings(
    comparison: ComparisonSet,
    objectives: tuple[RankingObjective, ...] = DEFAULT_RANKING_OBJECTIVES,
) -> Rankings:
    """Award each objective's badge to every runtime that holds its best value.

    Matching uses exact equality against the best value, so ties award the
    badge to every tied runtime. Objectives are independent: one runtime can
    hold several badges. Runtimes missing the metric take no part in that
    objective.

    Args:
        comparison: Runtimes to rank
        objectives: Badges to compute; defaults to fastest throughput and
            lowest average latency

    Returns:
        Rankings with the best value per badge and the badges per runtime
    """
    rankings = Rankings(badges={label: [] for label in comparison.labels})

    for objective in objectives:
        values = {
            label: artifact.value(objective.metric, objective.field)
            for label, artifact in comparison.items()
        }
        present = [v for v in values.values() if v is not None]
        if not present:
            rankings.best[objective.badge] = None
            continue

        if objective.direction == OptimizationDirection.MAXIMIZE:
            best = max(present)
        else:
            best = min(present)
        rankings.best[objective.badge] = best

        for label, value in values.items():
            if value is not None and value == best:
                rankings.badges[label].append(objective.badge)

    return rankings
