"""Wire encoding for LED frames.

A frame is the raw UDP payload sent to the strip: three bytes per LED,
``[R0, G0, B0, R1, G1, B1, ...]``, in wiring order. There is no header,
length prefix, version byte or checksum, so the payload of an N-LED strip
is always exactly ``3 * N`` bytes.

Each channel is quantized by clamping to [0.0, 1.0], scaling by 255 and
truncating toward zero:

    >>> encode_channel(0.5)
    127
    >>> encode_channel(2.5)
    255
    >>> encode_channel(-3.0)
    0
"""

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightctrl.models.color import Color

BYTES_PER_LED = 3
MAX_CHANNEL_VALUE = 255


def encode_channel(value: float) -> int:
    """Quantize one normalized channel intensity to a byte value (0-255).

    Out-of-range values are clamped; NaN encodes as 0.
    """
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(clamped * float(MAX_CHANNEL_VALUE))


def encode_color(color: "Color") -> bytes:
    """Encode a color as three bytes in red, green, blue order."""
    return bytes((
        encode_channel(color.red),
        encode_channel(color.green),
        encode_channel(color.blue),
    ))


def encode_frame(colors: Iterable["Color"]) -> bytes:
    """Encode a sequence of colors into a frame payload, preserving order."""
    return b"".join(encode_color(color) for color in colors)
