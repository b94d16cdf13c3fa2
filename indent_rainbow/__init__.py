from .color import Color, color_from_argb, color_from_hex, create_color
from .colors import IndentRainbowColors
from .config import ConfigService, IrConfig, PaletteType, load_config_from_json
from .depth import ERROR_DEPTH, DepthResolver
from .errors import ColorInvariantError, ConfigError
from .opacity import apply_alpha
from .scheme import (
    ColorScheme,
    SchemeStore,
    TextAttributes,
    export_schemes_json,
    load_schemes_from_json,
)
from .sync import SchemeSynchronizer

__all__ = [
    "Color",
    "ColorInvariantError",
    "ColorScheme",
    "ConfigError",
    "ConfigService",
    "DepthResolver",
    "ERROR_DEPTH",
    "IndentRainbowColors",
    "IrConfig",
    "PaletteType",
    "SchemeStore",
    "SchemeSynchronizer",
    "TextAttributes",
    "apply_alpha",
    "color_from_argb",
    "color_from_hex",
    "create_color",
    "export_schemes_json",
    "load_config_from_json",
    "load_schemes_from_json",
]
