# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-screen groups for the CLI parameters, in display order."""

    INPUT = Group.create_ordered("Input")
    OUTPUT = Group.create_ordered("Output")
    REPORT = Group.create_ordered("Report")
    LOGGING = Group.create_ordered("Logging")
