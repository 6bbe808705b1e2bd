class PaletteError(Exception):
    """Base class for every error raised by palette_docs."""


class InputError(PaletteError):
    """Input file missing or unreadable."""


class DecodeError(PaletteError):
    """Input is not a JSON object of {palette: {key: hex}}."""


class DirectoryError(PaletteError):
    """Swatch output directory could not be created."""


class ColorFormatError(PaletteError, ValueError):
    """Hex color is not exactly 6 hex digits after an optional '#'."""


class SwatchWriteError(PaletteError, OSError):
    """A single swatch PNG could not be encoded or written."""
