import json
import logging
from enum import Enum

from .errors import ConfigError

logger = logging.getLogger(__name__)

MIN_OPACITY_MULTIPLIER = -1.0
MAX_OPACITY_MULTIPLIER = 1.0


class PaletteType(Enum):
    DEFAULT = "default"
    PASTEL = "pastel"
    SPECTRUM = "spectrum"
    NIGHTFALL = "nightfall"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(t.value for t in cls)
            raise ConfigError(f"Unknown palette type {value!r} (expected one of: {names})") from None


class IrConfig:
    """Indent rainbow settings, as exposed by the configuration service."""

    def __init__(
        self,
        palette_type=PaletteType.DEFAULT,
        custom_palette_number_colors=4,
        opacity_multiplier=0.0,
        use_formatter_highlighter=True,
    ):
        self.palette_type = PaletteType.parse(palette_type)
        self.custom_palette_number_colors = custom_palette_number_colors
        self.opacity_multiplier = opacity_multiplier
        self.use_formatter_highlighter = use_formatter_highlighter
        self.validate()

    def __repr__(self):
        return (
            f"IrConfig(palette_type={self.palette_type.value}, "
            f"custom_palette_number_colors={self.custom_palette_number_colors}, "
            f"opacity_multiplier={self.opacity_multiplier}, "
            f"use_formatter_highlighter={self.use_formatter_highlighter})"
        )

    def validate(self):
        n = self.custom_palette_number_colors
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ConfigError(f"custom_palette_number_colors must be an int >= 1, got: {n!r}")
        m = self.opacity_multiplier
        if isinstance(m, bool) or not isinstance(m, (int, float)):
            raise ConfigError(f"opacity_multiplier must be a number, got: {m!r}")
        if not MIN_OPACITY_MULTIPLIER <= m <= MAX_OPACITY_MULTIPLIER:
            raise ConfigError(f"opacity_multiplier must be in [-1, +1], got: {m!r}")
        if not isinstance(self.use_formatter_highlighter, bool):
            raise ConfigError(
                f"use_formatter_highlighter must be true or false, got: {self.use_formatter_highlighter!r}"
            )

    def to_dict(self):
        return {
            "palette_type": self.palette_type.value,
            "custom_palette_number_colors": self.custom_palette_number_colors,
            "opacity_multiplier": self.opacity_multiplier,
            "use_formatter_highlighter": self.use_formatter_highlighter,
        }

    @classmethod
    def from_dict(cls, data):
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)


def load_config_from_json(json_path):
    with open(json_path) as f:
        data = json.load(f)
    config = IrConfig.from_dict(data)
    logger.debug("Loaded %s from %s", config, json_path)
    return config


class ConfigService:
    """Holds the current IrConfig and notifies listeners when it changes."""

    def __init__(self, config=None):
        self.config = config or IrConfig()
        self._listeners = []

    def add_listener(self, callback):
        self._listeners.append(callback)

    def update(self, **changes):
        data = self.config.to_dict()
        data.update(changes)
        self.config = IrConfig.from_dict(data)
        for callback in self._listeners:
            callback(self.config)
        return self.config
