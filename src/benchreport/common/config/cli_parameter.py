# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Parameter


class CLIParameter(Parameter):
    """Configuration for a CLI parameter.

    Thin subclass of cyclopts.Parameter so every config field that is exposed
    on the command line is declared the same way.
    """


def DisableCLI(reason: str = "Not supported via command line") -> Parameter:  # noqa: N802
    """Keep a config field out of the command line.

    Args:
        reason: Why the field is not exposed. Only used for readability.
    """
    return Parameter(parse=False)
