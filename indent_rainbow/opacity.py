import logging

import numpy as np

from .color import Color, to_string_with_alpha
from .errors import ColorInvariantError

logger = logging.getLogger(__name__)

# Alpha boost for non-error colors composited over light backgrounds
LIGHT_BACKGROUND_BOOST = 0.05

# adjust_alpha scales alpha by OPACITY_SCALE_BASE ** multiplier
OPACITY_SCALE_BASE = 3.0


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{int(clamped * 255):02x}"


def adjust_alpha(alpha, opacity_multiplier):
    """Scale an alpha value by the user's opacity multiplier.

    A multiplier of 0 keeps alpha as is, +1 triples it and -1 divides it by
    three. The result is clamped into [0, 1].

    Args:
        alpha: Alpha in [0, 1] (may slightly exceed 1 after a boost)
        opacity_multiplier: Value in [-1, +1]

    Returns:
        float: Adjusted alpha in [0, 1]
    """
    scaled = alpha * OPACITY_SCALE_BASE ** opacity_multiplier
    return float(np.clip(scaled, 0.0, 1.0))


def effective_alpha(color, increase_opacity, opacity_multiplier):
    """Alpha that apply_alpha interpolates with for this color."""
    alpha = color.components()[3] + (LIGHT_BACKGROUND_BOOST if increase_opacity else 0.0)
    return adjust_alpha(alpha, opacity_multiplier)


def interpolate(foreground, background, alpha):
    """Per-channel linear interpolation: alpha=1 returns foreground."""
    return foreground * alpha + background * (1 - alpha)


def apply_alpha(color, background, increase_opacity, opacity_multiplier):
    """Composite a translucent color over an opaque editor background.

    Args:
        color: Translucent indent color (alpha < 255)
        background: Opaque scheme background (alpha == 255)
        increase_opacity: Add a small alpha boost (light backgrounds)
        opacity_multiplier: User opacity setting in [-1, +1]

    Returns:
        Color: Opaque mixed color

    Raises:
        ColorInvariantError: If background is translucent or color is opaque
    """
    if not background.is_opaque:
        raise ColorInvariantError(
            "expect editor background color to have alpha=255, "
            f"but got: {to_string_with_alpha(background)}",
            color=background,
        )
    if color.is_opaque:
        raise ColorInvariantError(
            f"expect indent color to have alpha<255, but got: {to_string_with_alpha(color)}",
            color=color,
        )

    alpha = effective_alpha(color, increase_opacity, opacity_multiplier)
    mixed = interpolate(
        np.array(color.components()[:3]),
        np.array(background.components()[:3]),
        alpha,
    )
    r, g, b = (int(c) for c in np.floor(mixed * 255 + 0.5))
    result = Color(r, g, b, 255)
    logger.debug(
        "[apply_alpha] input: %s, output: %s, alpha: %s, opacityMultiplier: %s",
        to_string_with_alpha(color),
        to_string_with_alpha(result),
        alpha,
        opacity_multiplier,
    )
    return result
