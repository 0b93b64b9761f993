"""registryconfig: typed configuration properties for schema registry clients."""

import httpx

from .config import SchemaRegistryConfig
from .property_names import PropertyNames, WELL_KNOWN_PROPERTIES
from .settings import (
    RegistryClientSettings,
    DEFAULT_REQUEST_TIMEOUT_MS,
    DEFAULT_MAX_CACHED_SCHEMAS,
)
from .exceptions import (
    RegistryConfigError,
    FormatError,
    ConfigurationError,
)

__all__ = [
    "SchemaRegistryConfig",
    "PropertyNames",
    "WELL_KNOWN_PROPERTIES",
    "RegistryClientSettings",
    "DEFAULT_REQUEST_TIMEOUT_MS",
    "DEFAULT_MAX_CACHED_SCHEMAS",
    "RegistryConfigError",
    "FormatError",
    "ConfigurationError",
    "create_http_client",
]

__version__ = "0.1.0"


def create_http_client(config: SchemaRegistryConfig) -> httpx.AsyncClient:
    """Convenience function to create an HTTP client from configuration properties.

    Args:
        config: Schema registry configuration properties

    Returns:
        Configured ``httpx.AsyncClient``

    Note:
        The properties are resolved once, when this is called; later changes
        to ``config`` do not reach the client. The caller owns the client and
        must close it with ``aclose()`` or by entering it with ``async with``.
    """
    return RegistryClientSettings.from_config(config).create_http_client()
