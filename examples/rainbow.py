"""Basic example: Scroll a rainbow along a UDP LED strip."""

import colorsys
import sys
import time

from lightctrl import Color, SizeMismatchError, TransportError, connect


def rainbow_frame(num_leds: int, offset: float) -> list[Color]:
    """Build one frame of hues spread evenly along the strip."""
    return [
        Color(*colorsys.hsv_to_rgb((offset + i / max(num_leds, 1)) % 1.0, 1.0, 1.0))
        for i in range(num_leds)
    ]


def main():
    """Send 100 rainbow frames to the device given on the command line."""
    address = sys.argv[1] if len(sys.argv) > 1 else "127.0.0.1:1234"
    num_leds = int(sys.argv[2]) if len(sys.argv) > 2 else 4

    print(f"Connecting to {address} ({num_leds} LEDs)...")
    with connect(address, num_leds) as leds:
        for step in range(100):
            try:
                leds.update(rainbow_frame(num_leds, step / 100))
            except TransportError as e:
                print(f"Frame {step} dropped: {e}")
            except SizeMismatchError as e:
                print(f"Wrong frame size: expected {e.expected}, got {e.received}")
                return
            time.sleep(1 / 30)
        print(leds)


if __name__ == "__main__":
    main()
