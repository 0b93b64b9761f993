"""Custom exceptions for registryconfig library."""


class RegistryConfigError(Exception):
    """Base exception for all registryconfig errors."""
    pass


class FormatError(RegistryConfigError):
    """Raised when a stored property value cannot be parsed to the requested type."""
    pass


class ConfigurationError(RegistryConfigError):
    """Raised when a property set cannot be resolved into client settings."""
    pass
