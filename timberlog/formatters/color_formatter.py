"""
ANSI color formatter

Color formatters are registered per level in the logger configuration and
handed, untouched, to color-capable writers.
"""

from typing import Dict, Optional, Tuple, Union

from timberlog.core.log_level import LogLevel

Color = Union[str, Tuple[int, int, int]]

RESET = "\033[0m"

# Standard 8-color palette (SGR offsets)
ANSI_COLORS: Dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}


def _color_code(color: Color, base: int) -> str:
    """Build the SGR parameters for a foreground (30) or background (40) color."""
    if isinstance(color, str):
        try:
            return str(base + ANSI_COLORS[color.lower()])
        except KeyError:
            raise ValueError(f"Unknown color: {color}") from None

    if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
        raise ValueError(f"RGB color must be three values in 0..255: {color}")
    r, g, b = color
    return f"{base + 8};2;{r};{g};{b}"


class ColorFormatter:
    """
    Wrap text in ANSI escape codes.

    Colors are either palette names (``"red"``) or 24-bit RGB triples.
    """

    def __init__(
        self,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
        bold: bool = False,
    ):
        """
        Initialize color formatter.

        Args:
            foreground: Text color
            background: Background color
            bold: Render text in bold

        Raises:
            ValueError: If a color is not a known name or valid RGB triple

        Example:
            ColorFormatter("red").format("boom")            # red text
            ColorFormatter((255, 128, 0), bold=True)       # bold orange
        """
        codes = []
        if bold:
            codes.append("1")
        if foreground is not None:
            codes.append(_color_code(foreground, 30))
        if background is not None:
            codes.append(_color_code(background, 40))

        self.foreground = foreground
        self.background = background
        self.bold = bold
        self._prefix = f"\033[{';'.join(codes)}m" if codes else ""

    @property
    def prefix(self) -> str:
        """Escape sequence written before the text."""
        return self._prefix

    def format(self, message: str) -> str:
        """Return ``message`` wrapped in this formatter's colors."""
        if not self._prefix:
            return message
        return f"{self._prefix}{message}{RESET}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorFormatter):
            return NotImplemented
        return self._prefix == other._prefix

    def __hash__(self) -> int:
        return hash(self._prefix)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"ColorFormatter(foreground={self.foreground!r}, "
            f"background={self.background!r}, bold={self.bold})"
        )


def default_color_formatters() -> Dict[LogLevel, ColorFormatter]:
    """
    Get the default per-level palette.

    Returns:
        Mapping from every message level to a ColorFormatter
    """
    return {
        LogLevel.ERROR: ColorFormatter("red", bold=True),
        LogLevel.WARN: ColorFormatter("yellow"),
        LogLevel.EVENT: ColorFormatter("magenta"),
        LogLevel.INFO: ColorFormatter("green"),
        LogLevel.DEBUG: ColorFormatter("cyan"),
    }
