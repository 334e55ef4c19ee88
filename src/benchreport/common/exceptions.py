# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised while collecting results and writing reports."""

from pathlib import Path


class BenchReportError(Exception):
    """Base class for all benchreport errors."""


class NoDataError(BenchReportError):
    """No runtime produced a usable result file.

    This is the only fatal condition of result collection; report generation
    must stop instead of rendering an empty report.
    """

    def __init__(self, results_dir: Path | str) -> None:
        self.results_dir = Path(results_dir)
        super().__init__(f"No benchmark data found in {self.results_dir}")


class PerLabelParseError(BenchReportError):
    """A single runtime's result file could not be read or decoded."""

    def __init__(self, label: str, source: str, reason: str) -> None:
        self.label = label
        self.source = source
        self.reason = reason
        super().__init__(f"Could not parse {source} for runtime '{label}': {reason}")


class OutputWriteError(BenchReportError):
    """The report destination could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write report to {self.path}: {reason}")
