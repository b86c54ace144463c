"""Click parameter types."""

import click

from lightctrl.models import Color


class ColorParamType(click.ParamType):
    """Parse a color given as 'r,g,b' floats or a '#RRGGBB' hex string."""

    name = "color"

    def convert(self, value, param, ctx) -> Color:
        if isinstance(value, Color):
            return value

        text = value.strip()
        if text.startswith("#"):
            try:
                return Color.from_hex(text)
            except ValueError as e:
                self.fail(str(e), param, ctx)

        parts = text.split(",")
        if len(parts) != 3:
            self.fail(f"{value!r} is not 'r,g,b' or '#RRGGBB'", param, ctx)
        try:
            red, green, blue = (float(part) for part in parts)
        except ValueError:
            self.fail(f"{value!r} has a non-numeric channel", param, ctx)
        return Color(red, green, blue)


COLOR = ColorParamType()
