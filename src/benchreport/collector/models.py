# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for collected benchmark results."""

import math
from collections.abc import ItemsView, KeysView
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MetricSummary(BaseModel):
    """Statistical summary of one metric, as written in a k6 "values" object.

    Every field is optional: a Rate metric only carries ``rate``, a Trend
    metric carries ``avg`` and percentiles but no ``rate``. Unknown fields are
    ignored and non-numeric values are treated as absent.

    Attributes:
        rate: Events per second (counters) or ratio (rates)
        avg: Mean value
        min: Minimum value
        med: Median value
        max: Maximum value
        p90: 90th percentile, written as "p(90)"
        p95: 95th percentile, written as "p(95)"
        count: Number of samples
        passes: Number of truthy samples (rate metrics)
        fails: Number of falsy samples (rate metrics)
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    rate: float | None = None
    avg: float | None = None
    min: float | None = None
    med: float | None = None
    max: float | None = None
    p90: float | None = Field(default=None, alias="p(90)")
    p95: float | None = Field(default=None, alias="p(95)")
    count: float | None = None
    passes: float | None = None
    fails: float | None = None

    @field_validator("*", mode="before")
    @classmethod
    def drop_non_numeric(cls, v: Any) -> float | None:
        if isinstance(v, bool) or not isinstance(v, int | float):
            return None
        if isinstance(v, float) and not math.isfinite(v):
            return None
        return v

    def get(self, field: str) -> float | None:
        """Look up a value by its k6 name (e.g. "p(95)") or attribute name."""
        for name, info in type(self).model_fields.items():
            if field in (name, info.alias):
                return getattr(self, name)
        return None

    def to_values(self) -> dict[str, float]:
        """Return the present fields keyed by their k6 names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResultArtifact(BaseModel):
    """One parsed result file for a runtime.

    Attributes:
        label: Runtime label the file belongs to
        source: File name the result was read from
        captured_at: File modification time (epoch seconds), only used to pick the latest file
        metrics: Metric name to summary
    """

    model_config = ConfigDict(frozen=True)

    label: str
    source: str
    captured_at: float
    metrics: dict[str, MetricSummary] = Field(default_factory=dict)

    def value(self, metric: str, field: str) -> float | None:
        """Return one field of one metric, or None when either is missing."""
        summary = self.metrics.get(metric)
        if summary is None:
            return None
        return summary.get(field)


class ComparisonSet(BaseModel):
    """The latest result artifact per runtime, in discovery order.

    Holds at most one artifact per label. Built once per report and never
    modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    artifacts: dict[str, ResultArtifact] = Field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        return list(self.artifacts)

    def keys(self) -> KeysView[str]:
        return self.artifacts.keys()

    def items(self) -> ItemsView[str, ResultArtifact]:
        return self.artifacts.items()

    def get(self, label: str) -> ResultArtifact | None:
        return self.artifacts.get(label)

    def __getitem__(self, label: str) -> ResultArtifact:
        return self.artifacts[label]

    def __contains__(self, label: object) -> bool:
        return label in self.artifacts

    def __len__(self) -> int:
        return len(self.artifacts)
