# rhythm_kit/models/errors.py


class ConfigError(ValueError):
    """Raised when a theme or a style definition is misconfigured."""
