"""Configuration property names understood by schema registry clients."""

from typing import Final


class PropertyNames:
    """Configuration property names specific to the schema registry client.

    These strings are shared with the registry client and must not change.
    """

    SCHEMA_REGISTRY_URL: Final = "schema.registry.url"
    """A comma-separated list of URLs for schema registry instances."""

    SCHEMA_REGISTRY_REQUEST_TIMEOUT_MS: Final = "schema.registry.request.timeout.ms"
    """Timeout for requests to the schema registry. Default: 30000."""

    SCHEMA_REGISTRY_MAX_CACHED_SCHEMAS: Final = "schema.registry.max.cached.schemas"
    """Maximum number of schemas the client caches locally. Default: 1000."""

    SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE: Final = "schema.registry.basic.auth.credentials.source"
    """Which configuration property(ies) provide the basic auth credentials."""

    SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO: Final = "schema.registry.basic.auth.user.info"
    """Basic auth credentials in the form {username}:{password}."""


SCHEMA_REGISTRY_PREFIX: Final = "schema.registry."

WELL_KNOWN_PROPERTIES: Final[tuple[str, ...]] = (
    PropertyNames.SCHEMA_REGISTRY_URL,
    PropertyNames.SCHEMA_REGISTRY_REQUEST_TIMEOUT_MS,
    PropertyNames.SCHEMA_REGISTRY_MAX_CACHED_SCHEMAS,
    PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE,
    PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO,
)

# Client properties read when the credentials source is SASL_INHERIT.
SASL_USERNAME: Final = "sasl.username"
SASL_PASSWORD: Final = "sasl.password"

# Properties whose values are masked when a configuration is printed.
REDACTED_PROPERTIES: Final[frozenset[str]] = frozenset({
    PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO,
    SASL_PASSWORD,
})
