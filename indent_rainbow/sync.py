import logging

from .color import is_color_light, to_string_with_alpha
from .errors import ColorInvariantError
from .palette.catalog import BuiltinPalette

logger = logging.getLogger(__name__)


class SchemeSynchronizer:
    """Keeps the composited built-in palette colors of every scheme current."""

    def __init__(self, selector):
        self.selector = selector

    def resync_all_schemes(self, config, all_schemes):
        """Recompute and store opaque indent colors for each scheme.

        Writes only colors that differ from what the scheme already holds, so
        a repeated call with unchanged inputs writes nothing. Schemes with at
        least one write are marked dirty.

        Args:
            config: Current IrConfig, or None when no config service exists
            all_schemes: Iterable of ColorScheme

        Raises:
            ColorInvariantError: If a scheme holds a translucent indent color
        """
        if config is not None and not config.use_formatter_highlighter:
            return

        palette = self.selector.active_palette(config)
        # Custom palettes are opaque from the start
        if not isinstance(palette, BuiltinPalette):
            return

        opacity_multiplier = config.opacity_multiplier if config is not None else 0.0
        for scheme in all_schemes:
            logger.debug(
                "[resync_all_schemes] scheme: %s, defaultBackground: %s",
                scheme.name,
                to_string_with_alpha(scheme.default_background),
            )
            if self._sync_scheme(scheme, palette, opacity_multiplier):
                scheme.mark_dirty()

    def _sync_scheme(self, scheme, palette, opacity_multiplier):
        derived = palette.derive_colors(
            scheme.default_background,
            opacity_multiplier,
            boost_light=is_color_light(scheme.default_background),
        )
        any_color_changed = False
        for key, mixed in derived.items():
            attributes = scheme.get_attributes(key)
            current = attributes.background
            if current is not None and not current.is_opaque:
                raise ColorInvariantError(
                    f"unexpected attributes value for {key} in scheme {scheme.name}: "
                    f"{attributes} ({to_string_with_alpha(current)})",
                    color=current,
                )
            if mixed != current:
                logger.debug(
                    "Changing color of %s in scheme %s from %s to %s",
                    key,
                    scheme.name,
                    to_string_with_alpha(current),
                    to_string_with_alpha(mixed),
                )
                scheme.set_attributes(key, attributes._replace(background=mixed))
                any_color_changed = True
        return any_color_changed
