import math

import numpy as np
from loguru import logger
from PIL import Image

from pixelsays.engine import ScaledGrid
from pixelsays.errors import InvalidWidth

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 2.0


def fit_grid(
    width: int,
    height: int,
    max_cols: int,
    max_rows: int | None = None,
    cell_aspect: float = CELL_ASPECT,
) -> tuple[int, int]:
    """Return (cols, rows) of the cell grid for a ``width`` x ``height`` image.

    The image is only ever shrunk. Each cell covers ``cell_aspect`` times as
    many source rows as source columns so the output keeps the image's
    proportions on screen. Both dimensions are at least one cell.
    """
    if max_cols <= 0:
        raise InvalidWidth(f"Column budget must be positive, got {max_cols}")
    if max_rows is not None and max_rows <= 0:
        raise InvalidWidth(f"Row budget must be positive, got {max_rows}")

    cols = min(width, max_cols)
    scale = cols / width
    rows = round(height * scale / cell_aspect)
    if max_rows is not None and rows > max_rows:
        rows = max_rows
        cols = math.floor(width * max_rows * cell_aspect / height)
    return max(1, cols), max(1, rows)


def sample_grid(image: Image.Image, cols: int, rows: int) -> ScaledGrid:
    """Average each block of source pixels down to one cell.

    Returns per-cell RGB colours and ITU-R 601-2 luminance, both uint8.
    """
    cells = image.convert("RGB").resize((cols, rows), Image.Resampling.BOX)
    colours = np.asarray(cells, dtype=np.uint8)
    luminance = np.asarray(cells.convert("L"), dtype=np.uint8)
    return ScaledGrid(colours=colours, luminance=luminance)


def scale_image(image: Image.Image, max_cols: int, max_rows: int | None = None) -> ScaledGrid:
    cols, rows = fit_grid(image.width, image.height, max_cols, max_rows)
    logger.debug("Scaling {}x{} image to {}x{} cells", image.width, image.height, cols, rows)
    return sample_grid(image, cols, rows)
