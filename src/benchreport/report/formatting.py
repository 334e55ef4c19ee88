# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Number formatting shared by the summary cards, the tables and the charts."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

NOT_AVAILABLE = "N/A"


def round_number(value: float | None, decimals: int = 2) -> float | None:
    """Round half away from zero on the value's decimal representation.

    ``repr`` of the float is used rather than its binary value, so 1234.565
    rounds to 1234.57 even though the nearest double is slightly below it.

    Returns:
        The rounded value, or None if ``value`` is None or not finite
    """
    quantized = _quantize(value, decimals)
    if quantized is None:
        return None
    return float(quantized)


def format_number(value: float | None, decimals: int = 2) -> str:
    """Format a value with exactly ``decimals`` places, or "N/A" if absent."""
    quantized = _quantize(value, decimals)
    if quantized is None:
        return NOT_AVAILABLE
    return format(quantized, "f")


def format_percent(ratio: float | None, decimals: int = 2) -> str:
    """Format a 0..1 ratio as a percentage, e.g. 0.98 -> "98.00%"."""
    if ratio is None:
        return NOT_AVAILABLE
    return f"{format_number(ratio * 100, decimals)}%"


def _quantize(value: float | None, decimals: int) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
        if not number.is_finite():
            return None
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
            quantized = number.quantize(
                Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
            )
    except (InvalidOperation, TypeError, ValueError):
        return None
    # "-0.00" reads as a bug in a report
    if quantized.is_zero():
        quantized = abs(quantized)
    return quantized
