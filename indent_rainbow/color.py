from collections import namedtuple

# Fixed factor of the darkening transform applied to scheme backgrounds
DARKER_FACTOR = 0.7

# Perceived brightness (0-255) at or above which a background counts as light
LIGHT_BRIGHTNESS_THRESHOLD = 128


def rgba_to_hex(r, g, b, a=255):
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def hex_to_rgba(hex_color):
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into an (r, g, b, a) tuple."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 6:
        hex_color += "ff"
    if len(hex_color) != 8:
        raise ValueError(f"Expected #rrggbb or #rrggbbaa, got: #{hex_color}")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4, 6))


def perceived_brightness(r, g, b):
    """Weighted RGB average (ITU-R BT.601), 0-255"""
    return (299 * r + 587 * g + 114 * b) / 1000


class Color(namedtuple("Color", ["red", "green", "blue", "alpha"])):
    """An 8-bit RGBA color. Equality is channel-for-channel."""

    __slots__ = ()

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)

    @property
    def hex(self):
        return rgba_to_hex(*self)

    @property
    def is_opaque(self):
        return self.alpha == 255

    @property
    def brightness(self):
        return perceived_brightness(*self.rgb)

    def components(self):
        """Return the four channels normalized to floats in [0, 1]."""
        return tuple(c / 255 for c in self)


def create_color(r, g, b, a=255):
    """Create a Color, clamping every channel into 0-255"""
    r, g, b, a = (max(0, min(255, int(c))) for c in (r, g, b, a))
    return Color(r, g, b, a)


def color_from_argb(value):
    """Decode a packed ``0xAARRGGBB`` integer."""
    return Color(
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def color_from_hex(hex_color):
    return Color(*hex_to_rgba(hex_color))


def darker(color):
    """Darken each channel by DARKER_FACTOR, keeping alpha."""
    return Color(
        max(int(color.red * DARKER_FACTOR), 0),
        max(int(color.green * DARKER_FACTOR), 0),
        max(int(color.blue * DARKER_FACTOR), 0),
        color.alpha,
    )


def is_color_light(color):
    return color.brightness >= LIGHT_BRIGHTNESS_THRESHOLD


def to_string_with_alpha(color):
    if color is None:
        return "null"
    return f"Color[r={color.red},g={color.green},b={color.blue},a={color.alpha}]"
