"""Color representation for half-block canvases."""

from enum import IntEnum


class Color(IntEnum):
    """
    The eight standard ANSI colors.

    The numeric value is the SGR color digit, so ``Color.RED`` renders as
    ``3`` + ``1`` for foreground and ``4`` + ``1`` for background.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by name (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(c.name.lower() for c in cls)
            raise ValueError(f"Unknown color: {name!r} (expected one of {valid})") from None

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for foreground color."""
        return f"3{self.value}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameter for background color."""
        return f"4{self.value}"
