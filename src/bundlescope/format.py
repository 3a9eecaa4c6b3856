"""Human-readable size and share strings."""


def format_bytes(size: int) -> str:
    """Format a byte count as ``B``, ``KB`` or ``MB`` (1024-based)."""
    if size < 1024:
        return f"{size} B"
    kb = size / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.2f} MB"


def format_pct(part: int, total: int) -> str:
    """Format *part* as a percentage of *total* with one decimal."""
    if total == 0:
        return "0.0%"
    return f"{part / total * 100:.1f}%"
