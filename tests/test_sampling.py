import numpy as np
import pytest
from PIL import Image

from pixelsays.errors import InvalidWidth
from pixelsays.sampling import fit_grid, sample_grid, scale_image


@pytest.mark.parametrize(
    "size, max_cols",
    [((1, 1), 1), ((640, 480), 40), ((3, 1000), 80), ((1000, 3), 80), ((97, 61), 13), ((49, 49), 7)],
)
def test_fit_grid_within_budget(size, max_cols):
    width, height = size
    cols, rows = fit_grid(width, height, max_cols)
    scale = min(1.0, max_cols / width)
    assert 1 <= cols <= max_cols
    assert rows == max(1, round(height * scale / 2))


def test_fit_grid_never_upscales():
    assert fit_grid(10, 20, 80) == (10, 10)


def test_fit_grid_halves_height():
    assert fit_grid(100, 100, 50) == (50, 25)


def test_fit_grid_exact_budget():
    assert fit_grid(49, 10, 7)[0] == 7


def test_fit_grid_row_budget_shrinks_both():
    cols, rows = fit_grid(100, 400, 100, max_rows=50)
    assert rows == 50
    assert cols == 25


def test_fit_grid_row_budget_not_needed():
    assert fit_grid(100, 100, 50, max_rows=100) == (50, 25)


def test_fit_grid_custom_cell_aspect():
    assert fit_grid(2, 2, 2, cell_aspect=1.0) == (2, 2)


def test_fit_grid_minimum_one_cell():
    assert fit_grid(1, 1, 1) == (1, 1)
    assert fit_grid(1000, 1, 10) == (10, 1)


@pytest.mark.parametrize("max_cols, max_rows", [(0, None), (-5, None), (10, 0)])
def test_fit_grid_rejects_bad_budget(max_cols, max_rows):
    with pytest.raises(InvalidWidth):
        fit_grid(10, 10, max_cols, max_rows)


def test_sample_grid_averages_blocks():
    img = Image.new("RGB", (4, 2))
    pixels = img.load()
    for y in range(2):
        for x in range(2):
            pixels[x, y] = (200, 0, 100)
        for x in range(2, 4):
            pixels[x, y] = (0, 100, 0) if y == 0 else (0, 200, 0)
    grid = sample_grid(img, 2, 1)
    assert grid.colours.shape == (1, 2, 3)
    np.testing.assert_array_equal(grid.colours[0, 0], [200, 0, 100])
    np.testing.assert_allclose(grid.colours[0, 1], [0, 150, 0], atol=1)


def test_sample_grid_luminance():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (255, 255, 255))
    img.putpixel((1, 0), (0, 0, 0))
    grid = sample_grid(img, 2, 1)
    np.testing.assert_array_equal(grid.luminance, [[255, 0]])
    assert grid.luminance.dtype == np.uint8


def test_sample_grid_same_size_is_exact():
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(3, 5, 3), dtype=np.uint8)
    grid = sample_grid(Image.fromarray(arr), 5, 3)
    np.testing.assert_array_equal(grid.colours, arr)


def test_scale_image_dimensions():
    grid = scale_image(Image.new("RGB", (300, 200), (10, 20, 30)), 30)
    assert (grid.cols, grid.rows) == (30, 10)
    np.testing.assert_array_equal(grid.colours[5, 5], [10, 20, 30])
