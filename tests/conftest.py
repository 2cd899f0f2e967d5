import io

import pytest
from PIL import Image


def png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def checker_png(tmp_path):
    """A 2x4 PNG: white|black on the top half, black|white on the bottom half."""
    img = Image.new("RGB", (2, 4))
    pixels = img.load()
    for y in range(4):
        top = y < 2
        pixels[0, y] = (255, 255, 255) if top else (0, 0, 0)
        pixels[1, y] = (0, 0, 0) if top else (255, 255, 255)
    path = tmp_path / "checker.png"
    img.save(path)
    return path
