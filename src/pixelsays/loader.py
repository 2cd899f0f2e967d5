import io
import os
from pathlib import Path

from loguru import logger
from PIL import Image

from pixelsays.errors import DecodeError, SourceReadError

# Terminals have no alpha channel; transparent pixels are drawn over this
BACKGROUND = (0, 0, 0)

ImageSource = Image.Image | bytes | str | os.PathLike


def _read(source: str | os.PathLike) -> bytes:
    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SourceReadError(f"Cannot read image {path}: {exc.strerror or exc}") from exc


def _decode(data: bytes) -> Image.Image:
    if not data:
        raise DecodeError("Image data is empty")
    fmt = None
    try:
        image = Image.open(io.BytesIO(data))
        fmt = image.format
        image.load()
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"Image exceeds the decoder's size limit: {exc}", format=fmt) from exc
    except (OSError, SyntaxError, ValueError, EOFError) as exc:
        detail = f"{fmt} image is malformed or truncated" if fmt else "Unrecognised image format"
        raise DecodeError(f"{detail}: {exc}", format=fmt) from exc
    logger.debug("Decoded {} image, {}x{} {}", fmt, image.width, image.height, image.mode)
    return image


def flatten(image: Image.Image) -> Image.Image:
    """Composite any transparency over BACKGROUND and return an RGB image."""
    if image.has_transparency_data:
        bg = Image.new("RGBA", image.size, BACKGROUND + (255,))
        return Image.alpha_composite(bg, image.convert("RGBA")).convert("RGB")
    return image.convert("RGB")


def load_image(source: ImageSource) -> Image.Image:
    """Decode a path, raw bytes or an open image into an RGB pixel grid.

    The format is detected from the data itself, not the file name. Animated
    images contribute their first frame only.
    """
    if isinstance(source, Image.Image):
        image = source
    elif isinstance(source, (bytes, bytearray, memoryview)):
        image = _decode(bytes(source))
    else:
        image = _decode(_read(source))
    try:
        return flatten(image)
    except (OSError, ValueError) as exc:
        raise DecodeError(f"Cannot convert {image.mode} image to RGB: {exc}", format=image.format) from exc
