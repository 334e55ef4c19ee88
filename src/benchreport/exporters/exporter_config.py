# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration shared by the report exporters."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from benchreport.collector.models import ComparisonSet
from benchreport.common.config import ReportConfig


@dataclass(slots=True)
class ReportExporterConfig:
    """Inputs of a single report export.

    Attributes:
        comparison: ComparisonSet to export
        config: Report configuration (title, colors, thresholds)
        output_dir: Directory where the export file will be written
        generated_at: Timestamp recorded in the export
    """

    comparison: ComparisonSet
    config: ReportConfig
    output_dir: Path
    generated_at: datetime
