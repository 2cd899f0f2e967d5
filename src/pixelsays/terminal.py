import os
import sys

FALLBACK_SIZE = (80, 24)


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except OSError:
        return FALLBACK_SIZE
    return (size.columns, size.lines)


def image_budget(reserved_rows: int) -> tuple[int, int]:
    """Cells left for the image once ``reserved_rows`` are taken by the bubble and tail."""
    columns, rows = get_terminal_size()
    return columns, max(1, rows - reserved_rows)
