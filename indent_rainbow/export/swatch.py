import numpy as np
from PIL import Image

from .common import depth_color, preview_depths

BAND_HEIGHT = 16
BAND_WIDTH = 240
INDENT_WIDTH = 24


def build_swatch_array(scheme, resolver):
    """Build an RGB array with one band per preview depth.

    Each band paints the scheme background, then one indent-width block per
    level up to that depth, using the color the resolver picks for the level.
    The error band is painted with the error color across the full width.

    Returns:
        numpy.ndarray: uint8 array of shape (bands * BAND_HEIGHT, BAND_WIDTH, 3)
    """
    depths = preview_depths(resolver.palette)
    pixels = np.empty((len(depths) * BAND_HEIGHT, BAND_WIDTH, 3), dtype=np.uint8)
    pixels[:, :] = scheme.default_background.rgb

    for row, depth in enumerate(depths):
        top = row * BAND_HEIGHT
        band = pixels[top : top + BAND_HEIGHT]
        if depth == -1:
            band[:, :] = depth_color(scheme, resolver, depth).rgb
            continue
        for level in range(depth + 1):
            left = level * INDENT_WIDTH
            if left >= BAND_WIDTH:
                break
            color = depth_color(scheme, resolver, level)
            band[:, left : left + INDENT_WIDTH] = color.rgb
    return pixels


def render_swatch_png(scheme, resolver, output_path):
    """Render the indent preview bands of one scheme to a PNG file."""
    image = Image.fromarray(build_swatch_array(scheme, resolver))
    image.save(output_path)
    return output_path
