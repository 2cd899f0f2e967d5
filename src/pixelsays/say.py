"""Speech-bubble figures with an image or the classic mascot as the speaker."""

from typing import TextIO

from pixelsays.bubble import render_figure
from pixelsays.converter import image_to_lines
from pixelsays.engine import RenderMode
from pixelsays.loader import ImageSource
from pixelsays.mascot import mascot_lines
from pixelsays.wrapping import wrap_message

DEFAULT_WIDTH = 40


def say(message: str | bytes, max_width: int = DEFAULT_WIDTH) -> str:
    """Return ``message`` in a bubble spoken by the classic mascot."""
    return render_figure(wrap_message(message, max_width), mascot_lines())


def say_from_image(
    image: ImageSource,
    message: str | bytes,
    max_width: int = DEFAULT_WIDTH,
    mode: RenderMode = RenderMode.TRUECOLOR,
    columns: int | None = None,
    rows: int | None = None,
) -> str:
    """Return ``message`` in a bubble spoken by ``image`` drawn in ``mode``.

    The image is shrunk to at most ``columns`` cells across (``max_width`` when
    not given) and ``rows`` cells down. ``RenderMode.CLASSIC`` ignores the image.
    """
    lines = wrap_message(message, max_width)
    if mode is RenderMode.CLASSIC:
        return render_figure(lines, mascot_lines())
    body = image_to_lines(image, mode, columns if columns is not None else max_width, rows)
    return render_figure(lines, body)


def render_classic(message: str | bytes, max_width: int, sink: TextIO) -> None:
    sink.write(say(message, max_width))


def render_from_image(
    image: ImageSource,
    message: str | bytes,
    max_width: int,
    mode: RenderMode,
    sink: TextIO,
    columns: int | None = None,
    rows: int | None = None,
) -> None:
    """Write the image figure to ``sink``.

    Nothing is written unless the whole figure renders.
    """
    sink.write(say_from_image(image, message, max_width, mode, columns, rows))
