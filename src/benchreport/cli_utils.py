# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape


def raise_fatal_error_and_exit(
    message: str,
    exit_code: int = 1,
    console: Console | None = None,
) -> NoReturn:
    """Print a single-line error to stderr and exit the process.

    Args:
        message: Diagnostic shown to the user
        exit_code: Process exit status, non-zero
        console: Console to print to; defaults to stderr
    """
    console = console or Console(stderr=True)
    console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)
    sys.exit(exit_code)
