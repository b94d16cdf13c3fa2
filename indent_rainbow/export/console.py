from ..color import to_string_with_alpha
from .common import display_color, palette_keys


def print_palette(scheme, palette):
    """Print the colors a scheme holds for each palette key"""
    print("\n" + "=" * 60)
    print(
        f"{scheme.name.upper()} ({'DARK' if scheme.is_dark else 'LIGHT'} SCHEME, "
        f"background {scheme.default_background.hex})"
    )
    print("=" * 60)

    for key in palette_keys(palette):
        stored = scheme.background_of(key)
        shown = display_color(scheme, key)
        print(f"  {key:34} {shown.hex}  ({to_string_with_alpha(stored)})")
