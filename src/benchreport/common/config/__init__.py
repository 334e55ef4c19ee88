# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from benchreport.common.config.base_config import BaseConfig
from benchreport.common.config.cli_parameter import CLIParameter, DisableCLI
from benchreport.common.config.config_defaults import ReportDefaults
from benchreport.common.config.groups import Groups
from benchreport.common.config.report_config import LogLevel, ReportConfig

__all__ = [
    "BaseConfig",
    "CLIParameter",
    "DisableCLI",
    "Groups",
    "LogLevel",
    "ReportConfig",
    "ReportDefaults",
]
