class PixelSaysError(Exception):
    """Base class for everything the rendering pipeline raises."""


class InvalidWidth(PixelSaysError, ValueError):
    """A line width or cell budget was zero or negative."""


class EncodingError(PixelSaysError, ValueError):
    """The message is not valid character data."""


class DecodeError(PixelSaysError, ValueError):
    """Image data is malformed, truncated or of an unknown format."""

    def __init__(self, message: str, format: str | None = None):
        super().__init__(message)
        self.format = format


class SourceReadError(PixelSaysError, OSError):
    """The image source could not be read."""
