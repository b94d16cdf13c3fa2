class ColorInvariantError(RuntimeError):
    """A color broke an opacity invariant (catalog bug or corrupted scheme data)."""

    def __init__(self, message, color=None):
        super().__init__(message)
        self.color = color


class ConfigError(ValueError):
    """Raised when configuration values are out of range or unknown."""
