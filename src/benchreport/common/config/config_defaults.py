# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReportDefaults:
    RESULTS_DIR = Path("results")
    RUNTIMES = ("fpm", "swoole", "franken")
    FILE_EXTENSION = "json"
    OUTPUT_DIR = Path(".")
    TITLE = "Runtime Benchmark"
    ERROR_RATE_THRESHOLD = 0.01
    EXPORT_SUMMARY_JSON = False
    LOG_LEVEL = "INFO"
    COLORS = {
        "fpm": "#EF4444",
        "swoole": "#3B82F6",
        "franken": "#10B981",
    }
    # Assigned to labels missing from COLORS, picked by a stable checksum of the label.
    FALLBACK_COLORS = (
        "#F59E0B",
        "#8B5CF6",
        "#EC4899",
        "#14B8A6",
        "#F97316",
        "#6366F1",
    )
