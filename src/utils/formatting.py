"""Utility functions for formatting output."""

UNIT = 1024
UNIT_PREFIXES = "KMGTPE"


def format_size(size_bytes: int, human_readable: bool = False) -> str:
    """Format a byte count for display.

    Args:
        size_bytes: Size in bytes to format.
        human_readable: Scale to the largest binary unit instead of
            printing the exact byte count.

    Returns:
        str: Formatted size string, e.g. ``"1536 bytes"`` or ``"1.5 KB"``.
    """
    if not human_readable:
        return f"{size_bytes} bytes"

    if size_bytes < UNIT:
        return f"{size_bytes} B"

    # Unit is picked on the integer quotient, so 1024**2 - 1 stays in KB
    divisor, exp = UNIT, 0
    n = size_bytes // UNIT
    while n >= UNIT:
        divisor *= UNIT
        exp += 1
        n //= UNIT

    return f"{size_bytes / divisor:.1f} {UNIT_PREFIXES[exp]}B"
