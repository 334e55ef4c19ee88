# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console
from rich.table import Table
from rich.text import Text

from benchreport.collector.models import ComparisonSet
from benchreport.common.config import ReportConfig
from benchreport.report.renderer import ReportRenderer


class ConsoleSummaryExporter:
    """Prints the summary cards of the report as a table on the console."""

    def __init__(self, comparison: ComparisonSet, config: ReportConfig) -> None:
        self.comparison = comparison
        self.config = config

    def build_table(self) -> Table:
        context = ReportRenderer(self.config).build_context(self.comparison)

        table = Table(title=f"{self.config.title} Summary", title_justify="left")
        table.add_column("Runtime", style="bold")
        table.add_column("Req/s", justify="right")
        table.add_column("Avg (ms)", justify="right")
        table.add_column("P95 (ms)", justify="right")
        table.add_column("Success", justify="right")
        table.add_column("Badges")
        table.add_column("Source", style="dim")

        for card in context.cards:
            success_style = "red" if card.error_flagged else "green"
            table.add_row(
                Text(card.label, style=card.color),
                card.throughput,
                card.avg_latency,
                card.p95_latency,
                Text(card.success_rate, style=success_style),
                ", ".join(badge.text for badge in card.badges),
                Text(card.source),
            )
        return table

    def export(self, console: Console) -> None:
        console.print(self.build_table())
