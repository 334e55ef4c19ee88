# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rankings, formatting and HTML rendering of a comparison set."""

from benchreport.report.formatting import (
    NOT_AVAILABLE,
    format_number,
    format_percent,
    round_number,
)
from benchreport.report.rankings import (
    DEFAULT_RANKING_OBJECTIVES,
    Badge,
    OptimizationDirection,
    RankingObjective,
    Rankings,
    compute_rankings,
)
from benchreport.report.renderer import ReportRenderer, is_error_flagged, success_rate

__all__ = [
    "Badge",
    "DEFAULT_RANKING_OBJECTIVES",
    "NOT_AVAILABLE",
    "OptimizationDirection",
    "RankingObjective",
    "Rankings",
    "ReportRenderer",
    "compute_rankings",
    "format_number",
    "format_percent",
    "is_error_flagged",
    "round_number",
    "success_rate",
]
