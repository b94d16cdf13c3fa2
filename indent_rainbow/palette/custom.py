import logging
import threading

from ..color import color_from_argb, darker
from ..config import PaletteType
from .catalog import DEFAULT_ERROR_COLOR

logger = logging.getLogger(__name__)

CUSTOM_ERROR_KEY = "INDENT_RAINBOW_ERROR_CUSTOM"
CUSTOM_INDENT_KEY_FORMAT = "INDENT_RAINBOW_COLOR_{}_CUSTOM"


class CustomPalette:
    """User-editable palette whose colors live in the schemes themselves.

    Construction seeds every known scheme with a starting background for each
    key (default error color, darkened scheme background for indents). Keys
    that already have a background are left alone, so user edits survive.
    """

    def __init__(self, number_colors, scheme_store):
        if number_colors < 1:
            raise ValueError(f"number_colors must be >= 1, got: {number_colors}")
        self.name = PaletteType.CUSTOM.value
        self.number_colors = number_colors
        self.error_key = CUSTOM_ERROR_KEY
        self.indent_keys = [
            CUSTOM_INDENT_KEY_FORMAT.format(i) for i in range(1, number_colors + 1)
        ]

        error_color = color_from_argb(DEFAULT_ERROR_COLOR)
        for scheme in scheme_store.all_schemes:
            _set_background_if_missing(scheme, self.error_key, error_color)

            indents_color = darker(scheme.default_background)
            for key in self.indent_keys:
                _set_background_if_missing(scheme, key, indents_color)

    def __repr__(self):
        return f"CustomPalette({self.number_colors} colors)"

    def is_error_key(self, key):
        return key == self.error_key


def _set_background_if_missing(scheme, key, background):
    attributes = scheme.get_attributes(key)
    if attributes.background is not None:
        return
    scheme.set_attributes(key, attributes._replace(background=background))
    logger.debug("Seeded %s in %s with %s", key, scheme.name, background.hex)


class CustomPaletteFactory:
    """Builds CustomPalette instances and caches the last one by size."""

    def __init__(self, scheme_store):
        self.scheme_store = scheme_store
        self._cached = None
        self._lock = threading.Lock()

    def build(self, number_colors):
        return CustomPalette(number_colors, self.scheme_store)

    def get_or_build(self, number_colors):
        with self._lock:
            cached = self._cached
            if cached is not None and cached.number_colors == number_colors:
                return cached
            logger.debug("Building custom palette with %d colors", number_colors)
            self._cached = self.build(number_colors)
            return self._cached
