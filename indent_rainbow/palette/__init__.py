from .catalog import (
    BUILTIN_PALETTES,
    DEFAULT,
    DEFAULT_ERROR_COLOR,
    NIGHTFALL,
    PASTEL,
    SPECTRUM,
    BuiltinPalette,
)
from .custom import CustomPalette, CustomPaletteFactory
from .selector import PaletteSelector

__all__ = [
    "BUILTIN_PALETTES",
    "DEFAULT",
    "DEFAULT_ERROR_COLOR",
    "NIGHTFALL",
    "PASTEL",
    "SPECTRUM",
    "BuiltinPalette",
    "CustomPalette",
    "CustomPaletteFactory",
    "PaletteSelector",
]
