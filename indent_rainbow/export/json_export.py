import json

from ..opacity import effective_alpha, opacity_to_hex
from ..palette import BuiltinPalette
from ..scheme import scheme_to_dict
from .common import palette_keys


def export_json(scheme_store, palette, filepath, config=None):
    """Export a report of every scheme's colors for the active palette.

    Only the palette's keys are written. Use scheme.export_schemes_json for a
    full copy of the schemes.

    Args:
        scheme_store: SchemeStore to report on
        palette: Active palette (selects which keys are written)
        filepath: Output file path
        config: IrConfig used for the sync, recorded as metadata
    """
    keys = palette_keys(palette)
    data = {}
    for scheme in scheme_store.all_schemes:
        entry = scheme_to_dict(scheme, keys)
        entry["_appearance"] = "dark" if scheme.is_dark else "light"
        data[scheme.name] = entry

    data["_palette"] = palette.name
    opacity_multiplier = config.opacity_multiplier if config is not None else 0.0
    data["_opacity_multiplier"] = round(opacity_multiplier, 2)

    # Alpha each base color is composited with, before the light boost
    if isinstance(palette, BuiltinPalette):
        data["_alpha"] = {
            key: opacity_to_hex(effective_alpha(color, False, opacity_multiplier))
            for key, color in palette.colors_base.items()
        }

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
