ERROR_DEPTH = -1


class DepthResolver:
    """Picks the attribute key used to paint an indentation depth.

    Depths wrap around the palette: with K colors, depth K reuses the color
    of depth 0. ERROR_DEPTH resolves to the palette's error key.
    """

    def __init__(self, selector, config_service=None):
        self.selector = selector
        self.config_service = config_service

    @property
    def palette(self):
        config = self.config_service.config if self.config_service is not None else None
        return self.selector.active_palette(config)

    def error_attribute(self):
        return self.palette.error_key

    def attribute_for(self, depth_index):
        if depth_index == ERROR_DEPTH:
            return self.error_attribute()
        indent_keys = self.palette.indent_keys
        return indent_keys[depth_index % len(indent_keys)]

    def background_for(self, scheme, depth_index):
        return scheme.background_of(self.attribute_for(depth_index))
