# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Discovery of result files and selection of the latest one per runtime."""

import glob
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = [
    "ResultCandidate",
    "discover_candidates",
    "select_latest",
]


@dataclass(frozen=True, slots=True)
class ResultCandidate:
    """A result file that may be used for a runtime.

    Candidates found on disk carry a ``path`` and are read lazily, so only
    the selected file is ever opened. Candidates built in memory carry their
    ``content`` directly.

    Attributes:
        label: Runtime label the file belongs to
        source: File name (used for tie-breaking and diagnostics)
        captured_at: Modification time in epoch seconds
        path: Location on disk, if any
        content: Raw file content, if already loaded
    """

    label: str
    source: str
    captured_at: float
    path: Path | None = None
    content: bytes | None = None

    def read_bytes(self) -> bytes:
        if self.content is not None:
            return self.content
        if self.path is None:
            raise ValueError(f"Candidate {self.source} has neither content nor path")
        return self.path.read_bytes()


def _selection_key(candidate: ResultCandidate) -> tuple[float, str]:
    return candidate.captured_at, candidate.source


def select_latest(candidates: Iterable[ResultCandidate]) -> ResultCandidate | None:
    """Pick the most recently captured candidate.

    Ties on ``captured_at`` go to the lexicographically greatest file name, so
    the result never depends on the order candidates were discovered in.

    Returns:
        The selected candidate, or None if there are no candidates
    """
    return max(candidates, key=_selection_key, default=None)


def discover_candidates(
    results_dir: Path, labels: Sequence[str], extension: str = "json"
) -> list[ResultCandidate]:
    """List result files named ``{label}_*.{extension}`` for every label.

    Directories matching the pattern are ignored. A missing results
    directory yields no candidates.

    Args:
        results_dir: Directory written by the load test runs
        labels: Runtime labels to look for
        extension: File extension without the leading dot

    Returns:
        Candidates grouped by label, in label order
    """
    results_dir = Path(results_dir)
    if not results_dir.is_dir():
        logger.warning(f"Results directory does not exist: {results_dir}")
        return []

    candidates = []
    for label in labels:
        found = 0
        pattern = f"{glob.escape(label)}_*.{glob.escape(extension)}"
        for path in sorted(results_dir.glob(pattern)):
            if not path.is_file():
                continue
            try:
                captured_at = path.stat().st_mtime
            except OSError as e:
                logger.warning(f"Skipping {path.name}: cannot stat file ({e})")
                continue
            candidates.append(
                ResultCandidate(
                    label=label,
                    source=path.name,
                    captured_at=captured_at,
                    path=path,
                )
            )
            found += 1
        logger.debug(f"Found {found} result file(s) for runtime '{label}'")
    return candidates
