"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field

from lightctrl.protocol import MAX_CHANNEL_VALUE, encode_color


class Color(BaseModel):
    """Normalized RGB color.

    Channels are floats where 0.0 is off and 1.0 is full intensity. Values
    outside that range are stored unchanged and only clamped when the color
    is encoded for the wire, so colors can be freely scaled or mixed without
    losing information on the way.

    The model is frozen, which makes colors hashable and safe to share
    between frames.

    Example:
        >>> Color(1.0, 0.5, 0.0).to_bytes()
        b'\\xff\\x7f\\x00'
    """

    model_config = ConfigDict(frozen=True)

    red: float = Field(description="Red intensity (nominally 0.0-1.0)")
    green: float = Field(description="Green intensity (nominally 0.0-1.0)")
    blue: float = Field(description="Blue intensity (nominally 0.0-1.0)")

    def __init__(self, red: float, green: float, blue: float) -> None:
        """Create a color from channel intensities, positionally or by keyword."""
        super().__init__(red=red, green=green, blue=blue)

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit channel values (0-255)."""
        return cls(r / MAX_CHANNEL_VALUE, g / MAX_CHANNEL_VALUE, b / MAX_CHANNEL_VALUE)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a CSS hex color string such as '#FF8000' or 'ff8000'.

        Raises:
            ValueError: If the string is not six hex digits
        """
        digits = value.strip().removeprefix("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a color like '#RRGGBB', got {value!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid hex digits in color {value!r}") from None
        return cls.from_rgb8(r, g, b)

    def to_bytes(self) -> bytes:
        """Encode to the three wire bytes (clamped and truncated)."""
        return encode_color(self)

    def to_hex(self) -> str:
        """Convert the encoded bytes to a CSS hex color string (e.g., '#FF7F00')."""
        r, g, b = self.to_bytes()
        return f"#{r:02X}{g:02X}{b:02X}"
