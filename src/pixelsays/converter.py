from collections.abc import Callable

import numpy as np
from loguru import logger

from pixelsays.engine import RenderMode, ScaledGrid
from pixelsays.loader import ImageSource, load_image
from pixelsays.sampling import scale_image

BLOCK = "█"
LIGHT = "█"
DARK = " "
RESET = "\033[0m"

# Cells at or above this ITU-R 601-2 luminance count as light
THRESHOLD = 128


def _truecolor_row(colours: np.ndarray, luminance: np.ndarray) -> str:
    """Wrap each cell's block in an ANSI truecolor escape, resetting once at the end."""
    parts = [f"\033[38;2;{int(r)};{int(g)};{int(b)}m{BLOCK}" for r, g, b in colours]
    parts.append(RESET)
    return "".join(parts)


def _monochrome_row(colours: np.ndarray, luminance: np.ndarray) -> str:
    return "".join(LIGHT if value >= THRESHOLD else DARK for value in luminance)


def _invert_row(colours: np.ndarray, luminance: np.ndarray) -> str:
    return "".join(DARK if value >= THRESHOLD else LIGHT for value in luminance)


CELL_RENDERERS: dict[RenderMode, Callable[[np.ndarray, np.ndarray], str]] = {
    RenderMode.TRUECOLOR: _truecolor_row,
    RenderMode.MONOCHROME: _monochrome_row,
    RenderMode.INVERT: _invert_row,
}


def render_cells(grid: ScaledGrid, mode: RenderMode) -> list[str]:
    """Turn a scaled grid into one text line per row."""
    try:
        row_fn = CELL_RENDERERS[mode]
    except KeyError:
        raise ValueError(f"{mode} is not an image render mode") from None
    return [row_fn(colours, luminance) for colours, luminance in zip(grid.colours, grid.luminance)]


def image_to_lines(
    image: ImageSource,
    mode: RenderMode,
    columns: int,
    rows: int | None = None,
) -> list[str]:
    grid = scale_image(load_image(image), columns, rows)
    logger.debug("Rendering {}x{} cells in {} mode", grid.cols, grid.rows, mode.value)
    return render_cells(grid, mode)
