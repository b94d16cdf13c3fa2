import logging

from .depth import DepthResolver
from .palette import CustomPaletteFactory, PaletteSelector
from .sync import SchemeSynchronizer

logger = logging.getLogger(__name__)


class IndentRainbowColors:
    """Entry point the host wires to its config and scheme events.

    Args:
        scheme_store: SchemeStore with every known scheme
        config_service: ConfigService, or None to run with defaults
    """

    def __init__(self, scheme_store, config_service=None):
        self.scheme_store = scheme_store
        self.config_service = config_service
        self.custom_factory = CustomPaletteFactory(scheme_store)
        self.selector = PaletteSelector(self.custom_factory)
        self.synchronizer = SchemeSynchronizer(self.selector)
        self.resolver = DepthResolver(self.selector, config_service)
        if config_service is not None:
            config_service.add_listener(self._on_config_updated)

    @property
    def config(self):
        return self.config_service.config if self.config_service is not None else None

    @property
    def current_palette(self):
        return self.selector.active_palette(self.config)

    def get_error_text_attributes(self):
        return self.resolver.error_attribute()

    def get_text_attributes(self, depth_index):
        return self.resolver.attribute_for(depth_index)

    def on_scheme_change(self):
        self._update_all_schemes()

    def on_config_change(self):
        self._update_all_schemes()

    def refresh_editor_indent_colors(self):
        self._update_all_schemes()
        self.scheme_store.scheme_changed_or_switched(self.scheme_store.current)

    def _on_config_updated(self, config):
        logger.debug("Config changed: %s", config)
        self.on_config_change()

    def _update_all_schemes(self):
        self.synchronizer.resync_all_schemes(self.config, self.scheme_store.all_schemes)
