"""
File size helpers used when reporting candidates.
"""
from radarr_transcode.utils.constants import SIZE_UNITS


def human_readable_size(size: int) -> str:
    """
    Format a byte count using binary (1024-based) units.

    Radarr reports no file as a size of 0, so 0 is rendered as "N/A"
    rather than "0 B".

    Examples:
        human_readable_size(0) -> "N/A"
        human_readable_size(512) -> "512 B"
        human_readable_size(1536) -> "1.50 KB"
        human_readable_size(5 * 1024 ** 3) -> "5.00 GB"
    """
    if size == 0:
        return "N/A"

    unit = 1024
    if size < unit:
        return f"{size} B"

    div, exp = unit, 0
    n = size // unit
    while n >= unit and exp < len(SIZE_UNITS) - 1:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.2f} {SIZE_UNITS[exp]}"
