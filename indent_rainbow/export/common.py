from ..opacity import apply_alpha

SAMPLE_DEPTHS_PER_PALETTE = 2


def palette_keys(palette):
    return [palette.error_key] + list(palette.indent_keys)


def preview_depths(palette):
    """Depths to show: two full cycles of the palette, then the error depth."""
    return list(range(len(palette.indent_keys) * SAMPLE_DEPTHS_PER_PALETTE)) + [-1]


def _opaque(scheme, color):
    if color is None:
        return scheme.default_background
    if not color.is_opaque:
        return apply_alpha(color, scheme.default_background, False, 0.0)
    return color


def display_color(scheme, key):
    """Opaque color a key paints with in scheme (background when unset)."""
    return _opaque(scheme, scheme.background_of(key))


def depth_color(scheme, resolver, depth_index):
    """Opaque color the resolver's key for a depth paints with in scheme."""
    return _opaque(scheme, resolver.background_for(scheme, depth_index))
