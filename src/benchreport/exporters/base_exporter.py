# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for file exporters."""

import contextlib
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from benchreport.common.exceptions import OutputWriteError
from benchreport.exporters.exporter_config import ReportExporterConfig

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    """Return the mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class ReportBaseExporter(ABC):
    """Writes one file derived from a ComparisonSet.

    Subclasses provide the file name and the content; this class owns the
    write. The file is first written to a temporary file in the destination
    directory and then renamed over the target, so readers never see a
    partially written export.
    """

    def __init__(self, exporter_config: ReportExporterConfig):
        self._exporter_config = exporter_config
        self._comparison = exporter_config.comparison
        self._config = exporter_config.config
        self._output_dir = Path(exporter_config.output_dir)

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the name of the exported file."""

    @abstractmethod
    def _generate_content(self) -> str:
        """Return the full content of the exported file."""

    @property
    def output_path(self) -> Path:
        return self._output_dir / self.get_file_name()

    def export(self) -> Path:
        """Generate the content and write it, replacing any previous file.

        Returns:
            Path of the written file

        Raises:
            OutputWriteError: If the destination cannot be written
        """
        content = self._generate_content()
        path = self.output_path

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(path, str(e)) from e

        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                dir=self._output_dir,
                prefix=f".{path.stem}-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            # NamedTemporaryFile is always 0600; give the report the mode open() would
            os.chmod(tmp_name, _default_file_mode())
            Path(tmp_name).replace(path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    Path(tmp_name).unlink()
            raise OutputWriteError(path, str(e)) from e

        logger.debug(f"Wrote {len(content)} characters to {path}")
        return path
