# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Result collector: builds a ComparisonSet from load test result files."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import orjson
from pydantic import ValidationError

from benchreport.collector.discovery import (
    ResultCandidate,
    discover_candidates,
    select_latest,
)
from benchreport.collector.models import ComparisonSet, MetricSummary, ResultArtifact
from benchreport.common.exceptions import NoDataError, PerLabelParseError

logger = logging.getLogger(__name__)

__all__ = [
    "ResultCollector",
    "build_comparison_set",
    "parse_result_artifact",
]


def parse_result_artifact(candidate: ResultCandidate) -> ResultArtifact:
    """Read and decode one candidate into a ResultArtifact.

    Accepts either a full k6 summary export (metrics nested under a top-level
    "metrics" key) or a bare mapping of metric name to metric object. Only
    metrics that carry a "values" object are kept.

    Raises:
        PerLabelParseError: If the file cannot be read, is not valid JSON, or
            is not a JSON object
    """
    try:
        raw = candidate.read_bytes()
    except (OSError, ValueError) as e:
        raise PerLabelParseError(candidate.label, candidate.source, str(e)) from e

    try:
        document = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise PerLabelParseError(
            candidate.label, candidate.source, f"invalid JSON ({e})"
        ) from e

    if not isinstance(document, dict):
        raise PerLabelParseError(
            candidate.label,
            candidate.source,
            f"expected a JSON object, got {type(document).__name__}",
        )

    metric_map = document.get("metrics", document)
    if not isinstance(metric_map, dict):
        raise PerLabelParseError(
            candidate.label, candidate.source, '"metrics" is not a JSON object'
        )

    metrics = {}
    for metric_name, metric_data in metric_map.items():
        if not isinstance(metric_data, dict):
            continue
        values = metric_data.get("values")
        if not isinstance(values, dict):
            logger.debug(f"{candidate.source}: skipping '{metric_name}' (no values)")
            continue
        try:
            metrics[metric_name] = MetricSummary.model_validate(values)
        except ValidationError as e:
            logger.warning(f"{candidate.source}: skipping metric '{metric_name}': {e}")

    return ResultArtifact(
        label=candidate.label,
        source=candidate.source,
        captured_at=candidate.captured_at,
        metrics=metrics,
    )


def build_comparison_set(
    labels: Sequence[str],
    candidates: Iterable[ResultCandidate],
    results_dir: Path | str = "<memory>",
) -> ComparisonSet:
    """Select the latest candidate per label and parse it.

    Labels without candidates and labels whose selected file cannot be parsed
    are left out. Candidates for labels not listed in ``labels`` are ignored.

    Args:
        labels: Runtime labels in display order
        candidates: All known candidates, in any order
        results_dir: Where the candidates came from, used in the NoDataError message

    Returns:
        ComparisonSet in ``labels`` order

    Raises:
        NoDataError: If no label produced an artifact
    """
    by_label: dict[str, list[ResultCandidate]] = {label: [] for label in labels}
    for candidate in candidates:
        if candidate.label in by_label:
            by_label[candidate.label].append(candidate)

    artifacts = {}
    for label, label_candidates in by_label.items():
        selected = select_latest(label_candidates)
        if selected is None:
            logger.info(f"No result files for runtime '{label}', skipping")
            continue

        if len(label_candidates) > 1:
            logger.debug(
                f"Runtime '{label}': using {selected.source} "
                f"(newest of {len(label_candidates)} files)"
            )

        try:
            artifacts[label] = parse_result_artifact(selected)
        except PerLabelParseError as e:
            logger.warning(f"{e}; runtime '{label}' left out of the report")
            continue

        logger.info(f"Runtime '{label}': loaded {selected.source}")

    if not artifacts:
        raise NoDataError(results_dir)

    return ComparisonSet(artifacts=artifacts)


class ResultCollector:
    """Collects the latest result file per runtime from a results directory.

    Args:
        results_dir: Directory the load test writes its summary files to
        labels: Runtime labels to compare, in display order
        extension: Result file extension without the leading dot
    """

    def __init__(
        self,
        results_dir: Path,
        labels: Sequence[str],
        extension: str = "json",
    ):
        self.results_dir = Path(results_dir)
        self.labels = list(labels)
        self.extension = extension

    def collect(self) -> ComparisonSet:
        """Build the ComparisonSet for the configured labels.

        Raises:
            NoDataError: If no runtime produced a usable result file
        """
        logger.info(
            f"Collecting results for {', '.join(self.labels)} from {self.results_dir}"
        )
        candidates = discover_candidates(self.results_dir, self.labels, self.extension)
        return build_comparison_set(self.labels, candidates, self.results_dir)
