# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for benchreport tests."""

import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import orjson
import pytest

from benchreport.collector.models import ComparisonSet, MetricSummary, ResultArtifact
from benchreport.common.config import ReportConfig

FIXED_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0)


def k6_summary(
    rate: float | None = None,
    avg: float | None = None,
    p95: float | None = None,
    failed_rate: float | None = None,
    scenarios: dict[str, float] | None = None,
) -> dict[str, Any]:
    """Build a k6 summary export with only the given values present."""
    metrics: dict[str, Any] = {}
    if rate is not None:
        metrics["http_reqs"] = {"type": "counter", "values": {"count": 100, "rate": rate}}
    duration: dict[str, float] = {}
    if avg is not None:
        duration["avg"] = avg
    if p95 is not None:
        duration["p(95)"] = p95
    if duration:
        metrics["http_req_duration"] = {"type": "trend", "values": duration}
    if failed_rate is not None:
        metrics["http_req_failed"] = {
            "type": "rate",
            "values": {"rate": failed_rate, "passes": 0, "fails": 100},
        }
    for metric, scenario_avg in (scenarios or {}).items():
        metrics[metric] = {"type": "trend", "values": {"avg": scenario_avg}}
    return {"root_group": {"name": "", "checks": []}, "metrics": metrics}


def make_artifact(label: str, source: str | None = None, **values: Any) -> ResultArtifact:
    """Build a ResultArtifact the way the collector would from a k6 summary."""
    summary = k6_summary(**values)
    return ResultArtifact(
        label=label,
        source=source or f"{label}_2024-01-01.json",
        captured_at=1_700_000_000.0,
        metrics={
            name: MetricSummary.model_validate(metric["values"])
            for name, metric in summary["metrics"].items()
        },
    )


@pytest.fixture
def write_result(tmp_path: Path) -> Callable[..., Path]:
    """Write a result file into tmp_path/results with a given modification time."""
    results_dir = tmp_path / "results"
    results_dir.mkdir(exist_ok=True)

    def _write(
        name: str, document: Any, mtime: float | None = None, raw: bytes | None = None
    ) -> Path:
        path = results_dir / name
        path.write_bytes(raw if raw is not None else orjson.dumps(document))
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def results_dir(tmp_path: Path) -> Path:
    path = tmp_path / "results"
    path.mkdir(exist_ok=True)
    return path


@pytest.fixture
def report_config(tmp_path: Path) -> ReportConfig:
    return ReportConfig(
        results_dir=tmp_path / "results",
        output_dir=tmp_path / "out",
        generated_at=FIXED_TIMESTAMP,
    )


@pytest.fixture
def two_runtime_comparison() -> ComparisonSet:
    """The fpm vs swoole comparison used throughout the report tests."""
    return ComparisonSet(
        artifacts={
            "fpm": make_artifact("fpm", rate=1000, avg=12.3, p95=20.1, failed_rate=0.0),
            "swoole": make_artifact(
                "swoole", rate=2000, avg=5.0, p95=9.0, failed_rate=0.02
            ),
        }
    )


@pytest.fixture
def make_k6_summary() -> Callable[..., dict[str, Any]]:
    return k6_summary


@pytest.fixture
def artifact_factory() -> Callable[..., ResultArtifact]:
    return make_artifact


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_rich_logging so caplog keeps seeing package records."""
    logger = logging.getLogger("benchreport")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
