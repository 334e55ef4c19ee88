# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the result collector."""

import logging

import orjson
import pytest

from benchreport.collector import (
    ResultCandidate,
    ResultCollector,
    build_comparison_set,
    parse_result_artifact,
)
from benchreport.common.exceptions import NoDataError, PerLabelParseError


def _candidate(label: str, source: str, captured_at: float, document) -> ResultCandidate:
    content = document if isinstance(document, bytes) else orjson.dumps(document)
    return ResultCandidate(
        label=label, source=source, captured_at=captured_at, content=content
    )


class TestParseResultArtifact:
    """Tests for parse_result_artifact."""

    def test_full_k6_summary(self, make_k6_summary):
        document = make_k6_summary(rate=1000, avg=12.3, p95=20.1, failed_rate=0.0)

        artifact = parse_result_artifact(
            _candidate("fpm", "fpm_2024-01-01.json", 123.0, document)
        )

        assert artifact.label == "fpm"
        assert artifact.source == "fpm_2024-01-01.json"
        assert artifact.captured_at == 123.0
        assert artifact.value("http_reqs", "rate") == 1000
        assert artifact.value("http_req_duration", "avg") == 12.3
        assert artifact.value("http_req_duration", "p(95)") == 20.1
        assert artifact.value("http_req_failed", "rate") == 0.0

    def test_bare_metric_mapping(self):
        document = {
            "http_reqs": {"values": {"rate": 2000}},
            "http_req_duration": {"values": {"avg": 5.0, "p(95)": 9.0}},
        }

        artifact = parse_result_artifact(_candidate("swoole", "swoole_a.json", 1.0, document))

        assert artifact.value("http_reqs", "rate") == 2000
        assert artifact.value("http_req_duration", "p(95)") == 9.0

    def test_metrics_without_values_are_skipped(self):
        document = {
            "metrics": {
                "http_reqs": {"type": "counter"},
                "checks": "not-an-object",
                "iterations": {"values": {"rate": 10}},
            }
        }

        artifact = parse_result_artifact(_candidate("fpm", "fpm_a.json", 1.0, document))

        assert list(artifact.metrics) == ["iterations"]

    @pytest.mark.parametrize(
        "raw, reason",
        [
            (b"{not json", "invalid JSON"),
            (b"", "invalid JSON"),
            (b"[1, 2, 3]", "expected a JSON object"),
            (b'{"metrics": [1]}', '"metrics" is not a JSON object'),
        ],
    )
    def test_malformed_content(self, raw, reason):
        with pytest.raises(PerLabelParseError, match=reason) as exc_info:
            parse_result_artifact(_candidate("fpm", "fpm_bad.json", 1.0, raw))

        assert exc_info.value.label == "fpm"
        assert exc_info.value.source == "fpm_bad.json"

    def test_unreadable_file(self, tmp_path):
        candidate = ResultCandidate(
            label="fpm",
            source="fpm_gone.json",
            captured_at=1.0,
            path=tmp_path / "fpm_gone.json",
        )

        with pytest.raises(PerLabelParseError):
            parse_result_artifact(candidate)


class TestBuildComparisonSet:
    """Tests for build_comparison_set."""

    def test_latest_candidate_per_label(self, make_k6_summary):
        candidates = [
            _candidate("fpm", "fpm_new.json", 200.0, make_k6_summary(rate=2.0)),
            _candidate("fpm", "fpm_old.json", 100.0, make_k6_summary(rate=1.0)),
        ]

        comparison = build_comparison_set(["fpm"], candidates)

        assert comparison["fpm"].source == "fpm_new.json"
        assert comparison["fpm"].value("http_reqs", "rate") == 2.0

    def test_order_follows_labels_not_candidates(self, make_k6_summary):
        candidates = [
            _candidate("franken", "franken_a.json", 1.0, make_k6_summary(rate=3.0)),
            _candidate("fpm", "fpm_a.json", 1.0, make_k6_summary(rate=1.0)),
            _candidate("swoole", "swoole_a.json", 1.0, make_k6_summary(rate=2.0)),
        ]

        comparison = build_comparison_set(["fpm", "swoole", "franken"], candidates)

        assert comparison.labels == ["fpm", "swoole", "franken"]

    def test_missing_label_is_skipped(self, make_k6_summary):
        candidates = [_candidate("fpm", "fpm_a.json", 1.0, make_k6_summary(rate=1.0))]

        comparison = build_comparison_set(["fpm", "swoole"], candidates)

        assert comparison.labels == ["fpm"]

    def test_unknown_label_candidates_are_ignored(self, make_k6_summary):
        candidates = [
            _candidate("fpm", "fpm_a.json", 1.0, make_k6_summary(rate=1.0)),
            _candidate("roadrunner", "roadrunner_a.json", 1.0, make_k6_summary(rate=9.0)),
        ]

        comparison = build_comparison_set(["fpm"], candidates)

        assert comparison.labels == ["fpm"]

    def test_malformed_label_does_not_abort_others(self, make_k6_summary, caplog):
        candidates = [
            _candidate("fpm", "fpm_a.json", 1.0, b"garbage"),
            _candidate("swoole", "swoole_a.json", 1.0, make_k6_summary(rate=2.0)),
        ]

        with caplog.at_level(logging.WARNING, logger="benchreport"):
            comparison = build_comparison_set(["fpm", "swoole"], candidates)

        assert comparison.labels == ["swoole"]
        assert "fpm_a.json" in caplog.text

    def test_malformed_latest_is_not_replaced_by_older_file(self, make_k6_summary):
        """Test that only the newest file is considered, even if it is broken."""
        candidates = [
            _candidate("fpm", "fpm_new.json", 200.0, b"garbage"),
            _candidate("fpm", "fpm_old.json", 100.0, make_k6_summary(rate=1.0)),
            _candidate("swoole", "swoole_a.json", 1.0, make_k6_summary(rate=2.0)),
        ]

        comparison = build_comparison_set(["fpm", "swoole"], candidates)

        assert "fpm" not in comparison

    def test_no_candidates_raises_no_data_error(self):
        with pytest.raises(NoDataError, match="/data/results") as exc_info:
            build_comparison_set(["fpm", "swoole"], [], results_dir="/data/results")

        assert str(exc_info.value.results_dir) == "/data/results"

    def test_all_malformed_raises_no_data_error(self):
        candidates = [_candidate("fpm", "fpm_a.json", 1.0, b"garbage")]

        with pytest.raises(NoDataError):
            build_comparison_set(["fpm"], candidates)


class TestResultCollector:
    """Tests for ResultCollector against a real directory."""

    def test_collects_latest_file_by_mtime(self, write_result, results_dir, make_k6_summary):
        """Test that the newest file wins even when its name sorts first."""
        write_result("fpm_a.json", make_k6_summary(rate=1.0), mtime=2_000)
        write_result("fpm_z.json", make_k6_summary(rate=9.0), mtime=1_000)
        write_result("swoole_a.json", make_k6_summary(rate=2.0), mtime=1_000)

        comparison = ResultCollector(results_dir, ["fpm", "swoole", "franken"]).collect()

        assert comparison.labels == ["fpm", "swoole"]
        assert comparison["fpm"].source == "fpm_a.json"
        assert comparison["fpm"].captured_at == 2_000
        assert comparison["fpm"].value("http_reqs", "rate") == 1.0

    def test_empty_directory_raises_no_data_error(self, results_dir):
        with pytest.raises(NoDataError) as exc_info:
            ResultCollector(results_dir, ["fpm"]).collect()

        assert exc_info.value.results_dir == results_dir
        assert str(results_dir) in str(exc_info.value)

    def test_missing_directory_raises_no_data_error(self, tmp_path):
        with pytest.raises(NoDataError):
            ResultCollector(tmp_path / "nope", ["fpm"]).collect()
