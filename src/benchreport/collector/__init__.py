# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Collection of load test results into a comparison set."""

from benchreport.collector.collector import (
    ResultCollector,
    build_comparison_set,
    parse_result_artifact,
)
from benchreport.collector.discovery import (
    ResultCandidate,
    discover_candidates,
    select_latest,
)
from benchreport.collector.models import ComparisonSet, MetricSummary, ResultArtifact

__all__ = [
    "ComparisonSet",
    "MetricSummary",
    "ResultArtifact",
    "ResultCandidate",
    "ResultCollector",
    "build_comparison_set",
    "discover_candidates",
    "parse_result_artifact",
    "select_latest",
]
