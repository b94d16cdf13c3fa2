from ..config import PaletteType
from .catalog import BUILTIN_PALETTES, DEFAULT


class PaletteSelector:
    """Maps the configured palette type to a palette instance."""

    def __init__(self, custom_factory):
        self.custom_factory = custom_factory

    def active_palette(self, config):
        # No configuration service: plain default palette
        if config is None:
            return DEFAULT
        if config.palette_type is PaletteType.CUSTOM:
            return self.custom_factory.get_or_build(config.custom_palette_number_colors)
        return BUILTIN_PALETTES[config.palette_type]
