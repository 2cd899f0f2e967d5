import argparse
import sys
from pathlib import Path

from loguru import logger

from pixelsays.engine import RenderMode
from pixelsays.errors import PixelSaysError
from pixelsays.say import DEFAULT_WIDTH, render_classic, render_from_image
from pixelsays.terminal import image_budget
from pixelsays.wrapping import wrap_message

# Rows taken by the bubble borders and the tail, besides the message lines
FIGURE_OVERHEAD = 4


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("pixelsays")


def _add_mode_flags(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--monochrome",
        dest="mode",
        action="store_const",
        const=RenderMode.MONOCHROME,
        help="Black and white blocks chosen by brightness",
    )
    group.add_argument(
        "--invert",
        dest="mode",
        action="store_const",
        const=RenderMode.INVERT,
        help="Monochrome with light and dark swapped",
    )
    parser.set_defaults(mode=RenderMode.TRUECOLOR)
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log pipeline details to stderr")


def _fail(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None):
    """Render an image saying a message."""
    parser = argparse.ArgumentParser(description="Render an image saying something in a speech bubble")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("message", help="Text to put in the bubble")
    parser.add_argument(
        "max_width",
        nargs="?",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Maximum bubble line width in characters (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-c", "--columns", type=int, default=None, help="Image width in cells (default: same as max_width)"
    )
    parser.add_argument("-r", "--rows", type=int, default=None, help="Maximum image height in cells")
    parser.add_argument(
        "-t",
        "--fit-terminal",
        action="store_true",
        default=False,
        help="Shrink the image to fit the current terminal",
    )
    _add_mode_flags(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        _fail(f"File not found: {image_path}")

    columns, rows = args.columns, args.rows
    try:
        if args.fit_terminal:
            columns, rows = image_budget(len(wrap_message(args.message, args.max_width)) + FIGURE_OVERHEAD)
        render_from_image(image_path, args.message, args.max_width, args.mode, sys.stdout, columns, rows)
    except PixelSaysError as exc:
        _fail(str(exc))


def psays_main(argv: list[str] | None = None):
    """Say text from arguments, files or stdin, optionally with an image."""
    parser = argparse.ArgumentParser(description="Prints out input text with a mascot or a pixel image")
    parser.add_argument("-f", "--files", nargs="+", type=Path, default=None, help="Files whose contents to say")
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Width of the text box (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument("-i", "--image", type=Path, default=None, help="Path to the pixel image file")
    parser.add_argument("text", nargs="*", help="Text to say (default: read stdin)")
    _add_mode_flags(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.image is not None and not args.image.exists():
        _fail(f"File not found: {args.image}")

    if args.files:
        messages = []
        for path in args.files:
            try:
                messages.append(path.read_bytes())
            except OSError as exc:
                _fail(f"Failed to read {path}: {exc}")
    elif args.text:
        messages = [" ".join(args.text)]
    else:
        messages = [sys.stdin.buffer.read()]

    try:
        for message in messages:
            if args.image is None:
                render_classic(message, args.width, sys.stdout)
            else:
                render_from_image(args.image, message, args.width, args.mode, sys.stdout)
    except PixelSaysError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    main()
