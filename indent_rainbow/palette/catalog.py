"""Built-in indent palettes.

Colors are packed ``0xAARRGGBB`` values and are part of the visible product:
keep them byte-exact.
"""

from ..color import color_from_argb
from ..config import PaletteType
from ..opacity import apply_alpha

DEFAULT_ERROR_COLOR = 0x4D802020

ERROR_KEY = "INDENT_RAINBOW_ERROR"
INDENT_KEY_FORMAT = "INDENT_RAINBOW_COLOR_{}"


class BuiltinPalette:
    """Fixed translucent colors that get composited into every scheme.

    Attributes:
        name: Palette name, matches a PaletteType value
        error_key: Attribute key holding the error highlight
        indent_keys: Attribute keys for indent levels 1..N
        colors_base: Ordered mapping key -> translucent base color, error first
    """

    def __init__(self, name, error_color, indent_colors):
        if not indent_colors:
            raise ValueError(f"Palette {name!r} needs at least one indent color")
        self.name = name
        self.error_key = ERROR_KEY
        self.indent_keys = [INDENT_KEY_FORMAT.format(i) for i in range(1, len(indent_colors) + 1)]
        self.colors_base = {self.error_key: color_from_argb(error_color)}
        for key, value in zip(self.indent_keys, indent_colors):
            self.colors_base[key] = color_from_argb(value)

    def __repr__(self):
        return f"BuiltinPalette({self.name!r}, {len(self.indent_keys)} colors)"

    @property
    def indent_colors(self):
        return [self.colors_base[key] for key in self.indent_keys]

    @property
    def error_color(self):
        return self.colors_base[self.error_key]

    def is_error_key(self, key):
        return key == self.error_key

    def derive_colors(self, background, opacity_multiplier, boost_light=False):
        """Composite every base color over one opaque background.

        Args:
            background: Opaque scheme background
            opacity_multiplier: User opacity setting in [-1, +1]
            boost_light: Apply the light-background boost to non-error keys

        Returns:
            dict: key -> opaque derived color, same order as colors_base
        """
        return {
            key: apply_alpha(
                color,
                background,
                boost_light and not self.is_error_key(key),
                opacity_multiplier,
            )
            for key, color in self.colors_base.items()
        }


DEFAULT = BuiltinPalette(
    PaletteType.DEFAULT.value,
    DEFAULT_ERROR_COLOR,
    [0x12FFFF40, 0x127FFF7F, 0x12FF7FFF, 0x124FECEC],
)

# https://github.com/oderwat/vscode-indent-rainbow/pull/64
PASTEL = BuiltinPalette(
    PaletteType.PASTEL.value,
    DEFAULT_ERROR_COLOR,
    [0x26C7CEEA, 0x26B5EAD7, 0x26E2F0CB, 0x26FFDAC1, 0x26FFB7B2, 0x26FF9AA2],
)

SPECTRUM = BuiltinPalette(
    PaletteType.SPECTRUM.value,
    DEFAULT_ERROR_COLOR,
    [
        0x1200BFFF,
        0x121E90FF,
        0x127B68EE,
        0x128A2BE2,
        0x12C71585,
        0x12FF1493,
        0x12FF0000,
        0x12FF8C00,
        0x12FFD700,
        0x12ADFF2F,
        0x1232CD32,
        0x1220B2AA,
        0x1200CED1,
    ],
)

NIGHTFALL = BuiltinPalette(
    PaletteType.NIGHTFALL.value,
    DEFAULT_ERROR_COLOR,
    [
        0x120052A2,
        0x120065B4,
        0x1254589F,
        0x12D47796,
        0x12FFA3A1,
        0x12FEE9D6,
        0x12FFB9AD,
        0x12FFDA8B,
        0x12FFC07A,
        0x12FFAC8A,
    ],
)

BUILTIN_PALETTES = {
    PaletteType.DEFAULT: DEFAULT,
    PaletteType.PASTEL: PASTEL,
    PaletteType.SPECTRUM: SPECTRUM,
    PaletteType.NIGHTFALL: NIGHTFALL,
}
