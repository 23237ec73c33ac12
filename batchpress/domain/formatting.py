"""Size formatting helpers for presentation surfaces."""

from __future__ import annotations

import math


def domain_format_size_kb(size_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals.

    Args:
        size_bytes: Byte count.

    Returns:
        str: Text such as `488.28 KB`; zero renders as `0.00 KB`.
    """

    if not size_bytes:
        return "0.00 KB"
    return f"{size_bytes / 1024:.2f} KB"


def domain_compute_savings_percent(original_size_bytes: int, compressed_size_bytes: int) -> int:
    """Return the percentage saved by compression, rounded half up.

    Args:
        original_size_bytes: Source size in bytes.
        compressed_size_bytes: Output size in bytes.

    Returns:
        int: Percentage saved; negative when the output grew.

    Raises:
        ValueError: Raised when the original size is not positive.
    """

    if original_size_bytes <= 0:
        raise ValueError("original_size_bytes must be positive")
    return math.floor(100 - (compressed_size_bytes / original_size_bytes) * 100 + 0.5)
