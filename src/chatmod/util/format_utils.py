from typing import List, Tuple

DURATION_UNITS: Tuple[Tuple[str, int], ...] = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def format_duration(seconds: int, max_units: int = 2) -> str:
    """Return a compact human-readable duration such as ``"1h 30m"``.

    Only non-zero units are shown, largest first, and at most ``max_units``
    of them. Remaining smaller units are dropped, not rounded.

    Args:
        seconds: Duration in seconds. Negative values are treated as zero.
        max_units: Maximum number of units in the result.

    Returns:
        Formatted duration; ``"0s"`` for zero.
    """
    remaining = max(int(seconds), 0)
    parts: List[str] = []
    for suffix, size in DURATION_UNITS:
        if len(parts) >= max_units:
            break
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{suffix}")
    return " ".join(parts) if parts else "0s"
