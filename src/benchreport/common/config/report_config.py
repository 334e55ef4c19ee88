# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import zlib
from datetime import datetime
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator

from benchreport.common.config.base_config import BaseConfig
from benchreport.common.config.cli_parameter import CLIParameter, DisableCLI
from benchreport.common.config.config_defaults import ReportDefaults
from benchreport.common.config.groups import Groups

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ReportConfig(BaseConfig):
    """Configuration for collecting benchmark results and rendering the report."""

    @field_validator("runtimes", mode="before")
    @classmethod
    def parse_runtimes(cls, v: str | list[str] | tuple[str, ...]) -> list[str]:
        """Parse comma-separated runtime labels from CLI input.

        Accepts "fpm,swoole", ["fpm,swoole"] or ["fpm", "swoole"] and always
        returns a flat list, keeping the order in which labels were given.

        Raises:
            ValueError: If no labels remain or a label is repeated
        """
        if isinstance(v, str):
            v = [v]

        labels = []
        for item in v:
            labels.extend(part.strip() for part in str(item).split(",") if part.strip())

        if not labels:
            raise ValueError(
                "At least one runtime label is required. "
                "Example: --runtimes fpm,swoole,franken"
            )

        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(
                f"Duplicate runtime labels: {', '.join(duplicates)}. "
                "Each runtime may only be listed once."
            )
        return labels

    @field_validator("file_extension", mode="after")
    @classmethod
    def strip_leading_dot(cls, v: str) -> str:
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("File extension must not be empty (e.g. 'json')")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    results_dir: Annotated[
        Path,
        Field(
            description="Directory containing the load test result files. "
            "Files are expected to be named {runtime}_{anything}.{extension}.",
        ),
        CLIParameter(
            name=("--results-dir", "-d"),
            group=Groups.INPUT,
        ),
    ] = ReportDefaults.RESULTS_DIR

    runtimes: Annotated[
        list[str],
        Field(
            description="Runtime labels to compare, in display order. "
            "Accepts a comma-separated list (e.g. fpm,swoole,franken).",
        ),
        CLIParameter(
            name=("--runtimes", "-r"),
            group=Groups.INPUT,
        ),
    ] = Field(default_factory=lambda: list(ReportDefaults.RUNTIMES))

    file_extension: Annotated[
        str,
        Field(
            description="Extension of the result files to consider.",
        ),
        CLIParameter(
            name=("--file-extension",),
            group=Groups.INPUT,
        ),
    ] = ReportDefaults.FILE_EXTENSION

    output_dir: Annotated[
        Path,
        Field(
            description="Directory the report is written to. "
            "An existing report in this directory is overwritten.",
        ),
        CLIParameter(
            name=("--output-dir", "-o"),
            group=Groups.OUTPUT,
        ),
    ] = ReportDefaults.OUTPUT_DIR

    export_summary_json: Annotated[
        bool,
        Field(
            description="Also write a machine-readable benchmark-summary.json "
            "next to the HTML report.",
        ),
        CLIParameter(
            name=("--export-summary-json",),
            group=Groups.OUTPUT,
        ),
    ] = ReportDefaults.EXPORT_SUMMARY_JSON

    title: Annotated[
        str,
        Field(
            description="Heading shown at the top of the report.",
        ),
        CLIParameter(
            name=("--title",),
            group=Groups.REPORT,
        ),
    ] = ReportDefaults.TITLE

    error_rate_threshold: Annotated[
        float,
        Field(
            ge=0,
            le=1,
            description="Error rate above which a runtime's success rate is "
            "highlighted as a warning (0.01 means 1%).",
        ),
        CLIParameter(
            name=("--error-rate-threshold",),
            group=Groups.REPORT,
        ),
    ] = ReportDefaults.ERROR_RATE_THRESHOLD

    generated_at: Annotated[
        datetime | None,
        Field(
            description="Timestamp shown as 'Generated on' in the report (ISO 8601). "
            "Defaults to the current local time. Fixing it makes the output reproducible.",
        ),
        CLIParameter(
            name=("--generated-at",),
            group=Groups.REPORT,
        ),
    ] = None

    colors: Annotated[
        dict[str, str],
        Field(
            description="Chart and heading color per runtime label.",
        ),
        DisableCLI(reason="Colors are configured programmatically"),
    ] = Field(default_factory=lambda: dict(ReportDefaults.COLORS))

    log_level: Annotated[
        LogLevel,
        Field(
            description="Logging verbosity.",
        ),
        CLIParameter(
            name=("--log-level",),
            group=Groups.LOGGING,
        ),
    ] = ReportDefaults.LOG_LEVEL

    def color_for(self, label: str) -> str:
        """Return the configured color for a label, or a stable fallback."""
        if label in self.colors:
            return self.colors[label]
        palette = ReportDefaults.FALLBACK_COLORS
        return palette[zlib.crc32(label.encode("utf-8")) % len(palette)]

    def resolve_generated_at(self) -> datetime:
        if self.generated_at is not None:
            return self.generated_at
        return datetime.now().replace(microsecond=0)
