import re
import textwrap

from loguru import logger

from pixelsays.errors import EncodingError, InvalidWidth

# Any whitespace run that doesn't include a line break
_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\r\n]+")


def decode_message(message: str | bytes) -> str:
    """Return the message as text, rejecting data that isn't valid UTF-8."""
    if isinstance(message, (bytes, bytearray)):
        try:
            return bytes(message).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"Message is not valid UTF-8: {exc}") from exc
    try:
        # Lone surrogates (e.g. from surrogateescape'd argv) can't be printed
        message.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Message contains undecodable characters: {exc}") from exc
    return message


def merge_whitespace(text: str) -> str:
    return _HORIZONTAL_WHITESPACE.sub(" ", text)


def wrap_message(message: str | bytes, max_width: int) -> list[str]:
    """Wrap a message into lines of at most ``max_width`` characters.

    Lines break at whitespace where possible; words longer than the width are
    split. Line breaks already in the message are kept. Widths are counted in
    characters, so multi-byte text is never cut inside a character.
    """
    if max_width <= 0:
        raise InvalidWidth(f"Width must be positive, got {max_width}")

    text = merge_whitespace(decode_message(message))
    lines = []
    for paragraph in text.splitlines():
        lines.extend(textwrap.wrap(paragraph, width=max_width) or [""])
    if not lines:
        lines = [""]
    logger.debug("Wrapped {} characters into {} line(s) at width {}", len(text), len(lines), max_width)
    return lines
