"""Custom exceptions for configuration handling."""


class ConfigError(Exception):
    """Stored or supplied configuration is invalid."""
