from wcwidth import wcswidth

MIN_BUBBLE_WIDTH = 2

TAIL = [
    "        \\",
    "         \\",
]


def _frame(index: int, count: int) -> tuple[str, str]:
    """Left and right border glyphs for content line ``index`` of ``count``."""
    if count == 1:
        return "<", ">"
    if index == 0:
        return "/", "\\"
    if index == count - 1:
        return "\\", "/"
    return "|", "|"


def _display_width(line: str) -> int:
    """Terminal columns taken by ``line``; wide CJK characters count as two."""
    width = wcswidth(line)
    # Non-printable characters make wcswidth give up
    return width if width >= 0 else len(line)


def render_bubble(lines: list[str]) -> list[str]:
    """Draw the speech bubble around already-wrapped lines."""
    width = max(MIN_BUBBLE_WIDTH, max((_display_width(line) for line in lines), default=0))
    out = [" " + "_" * (width + 2)]
    for i, line in enumerate(lines):
        left, right = _frame(i, len(lines))
        padding = " " * (width - _display_width(line))
        out.append(f"{left} {line}{padding} {right}")
    out.append(" " + "-" * (width + 2))
    return out


def render_figure(lines: list[str], body: list[str]) -> str:
    """Join bubble, tail and body into the complete figure, one line per row."""
    return "".join(f"{row}\n" for row in render_bubble(lines) + TAIL + body)
