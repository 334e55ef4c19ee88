# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Metric names shared by the result collector and the report renderer.

The load test script writes these names into its summary export; nothing
else in the package should spell them out.
"""

from typing import NamedTuple

# Summary metrics written by k6 for every run.
THROUGHPUT_METRIC = "http_reqs"
LATENCY_METRIC = "http_req_duration"
FAILURE_METRIC = "http_req_failed"

# Fields inside a metric's "values" object.
RATE_FIELD = "rate"
AVG_FIELD = "avg"
P95_FIELD = "p(95)"


class ScenarioMetricKey(NamedTuple):
    """Maps a logical workload to the trend metric that carries its duration.

    Args:
        workload: Scenario name used by the load test (e.g. "read_posts")
        metric: Metric holding the per-request duration for that scenario
        title: Row heading in the report
        description: Short explanation of what the endpoint does
    """

    workload: str
    metric: str
    title: str
    description: str


SCENARIO_METRIC_KEYS: tuple[ScenarioMetricKey, ...] = (
    ScenarioMetricKey("health_check", "health_duration", "Health Check", "Static JSON, no DB"),
    ScenarioMetricKey("read_posts", "list_posts_duration", "List Posts", "DB query (Limit 20)"),
    ScenarioMetricKey("single_post", "single_post_duration", "Single Post", "DB Find by ID"),
    ScenarioMetricKey("write_posts", "create_post_duration", "Create Post", "DB Insert + Validation"),
    ScenarioMetricKey("heavy_compute", "heavy_duration", "Heavy Compute", "Fibonacci 30 + JSON loops"),
)
