"""Resolution of configuration properties into schema registry client settings."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from .conversions import parse_int
from .exceptions import ConfigurationError
from .property_names import (
    SASL_PASSWORD,
    SASL_USERNAME,
    SCHEMA_REGISTRY_PREFIX,
    WELL_KNOWN_PROPERTIES,
    PropertyNames,
)

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT_MS = 30000
DEFAULT_MAX_CACHED_SCHEMAS = 1000

CREDENTIALS_SOURCE_USER_INFO = "USER_INFO"
CREDENTIALS_SOURCE_SASL_INHERIT = "SASL_INHERIT"


@dataclass
class RegistryClientSettings:
    """Settings for a schema registry HTTP client, with defaults applied.

    Args:
        urls: Schema registry instance URLs, in the order they were configured
        request_timeout_ms: HTTP request timeout in milliseconds
        max_cached_schemas: Maximum number of schemas to cache locally
        auth: Optional basic authentication tuple (username, password)
    """
    urls: list[str] = field(default_factory=list)
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    max_cached_schemas: int = DEFAULT_MAX_CACHED_SCHEMAS
    auth: Optional[tuple[str, str]] = None

    @classmethod
    def from_config(cls, config: Iterable[tuple[str, str]]) -> "RegistryClientSettings":
        """Build settings from a property snapshot.

        Args:
            config: A SchemaRegistryConfig, or any iterable of (key, value) pairs

        Returns:
            Resolved settings

        Raises:
            ConfigurationError: If the properties cannot form a usable client configuration
            FormatError: If an integer property holds a malformed value
        """
        properties = dict(config)

        for key in properties:
            if key.startswith(SCHEMA_REGISTRY_PREFIX) and key not in WELL_KNOWN_PROPERTIES:
                logger.warning("Ignoring unknown schema registry property %s", key)

        urls = _split_urls(properties.get(PropertyNames.SCHEMA_REGISTRY_URL))
        if not urls:
            raise ConfigurationError(f"{PropertyNames.SCHEMA_REGISTRY_URL} must be specified")

        request_timeout_ms = _get_positive_int(
            properties, PropertyNames.SCHEMA_REGISTRY_REQUEST_TIMEOUT_MS, DEFAULT_REQUEST_TIMEOUT_MS
        )
        max_cached_schemas = _get_positive_int(
            properties, PropertyNames.SCHEMA_REGISTRY_MAX_CACHED_SCHEMAS, DEFAULT_MAX_CACHED_SCHEMAS
        )

        return cls(
            urls=urls,
            request_timeout_ms=request_timeout_ms,
            max_cached_schemas=max_cached_schemas,
            auth=_resolve_auth(properties),
        )

    @property
    def base_url(self) -> str:
        """URL of the first configured registry instance."""
        if not self.urls:
            raise ConfigurationError("No schema registry URL configured")
        return self.urls[0]

    @property
    def timeout_seconds(self) -> float:
        """Request timeout in seconds."""
        return self.request_timeout_ms / 1000

    def httpx_client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for constructing an ``httpx`` client from these settings."""
        auth = None
        if self.auth:
            auth = httpx.BasicAuth(self.auth[0], self.auth[1])

        return {
            "base_url": self.base_url,
            "timeout": httpx.Timeout(self.timeout_seconds),
            "auth": auth,
            "headers": {"Content-Type": "application/json"},
        }

    def create_http_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client for the first registry instance.

        The caller owns the client and must close it.
        """
        return httpx.AsyncClient(**self.httpx_client_kwargs())

    def __repr__(self) -> str:
        auth = None if self.auth is None else (self.auth[0], "********")
        return (
            f"{type(self).__name__}(urls={self.urls!r}, request_timeout_ms={self.request_timeout_ms!r}, "
            f"max_cached_schemas={self.max_cached_schemas!r}, auth={auth!r})"
        )


def _split_urls(raw: Optional[str]) -> list[str]:
    if raw is None:
        return []
    return [url.strip() for url in raw.split(",") if url.strip()]


def _get_positive_int(properties: dict[str, str], key: str, default: int) -> int:
    raw = properties.get(key)
    if raw is None:
        logger.debug("%s not set, using default %d", key, default)
        return default

    value = parse_int(key, raw)
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")
    return value


def _resolve_auth(properties: dict[str, str]) -> Optional[tuple[str, str]]:
    source = properties.get(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE)
    normalized = CREDENTIALS_SOURCE_USER_INFO if source is None else source.strip().upper()

    if normalized == CREDENTIALS_SOURCE_USER_INFO:
        user_info = properties.get(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO)
        if user_info is None:
            return None
        username, separator, password = user_info.partition(":")
        if not separator:
            raise ConfigurationError(
                f"{PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO} must be of the form 'username:password'"
            )
        return username, password

    if normalized == CREDENTIALS_SOURCE_SASL_INHERIT:
        username = properties.get(SASL_USERNAME)
        password = properties.get(SASL_PASSWORD)
        if username is None or password is None:
            raise ConfigurationError(
                f"{SASL_USERNAME} and {SASL_PASSWORD} must be set when "
                f"{PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE} is {CREDENTIALS_SOURCE_SASL_INHERIT}"
            )
        return username, password

    raise ConfigurationError(
        f"Invalid value {source!r} for {PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE}, "
        f"expected {CREDENTIALS_SOURCE_USER_INFO} or {CREDENTIALS_SOURCE_SASL_INHERIT}"
    )
