"""Typed property store for schema registry client configuration."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional, Union

from .conversions import parse_bool, parse_int, to_property_string
from .exceptions import FormatError
from .property_names import REDACTED_PROPERTIES, PropertyNames

logger = logging.getLogger(__name__)

PropertySource = Union[Mapping[str, str], Iterable[tuple[str, str]]]


class SchemaRegistryConfig:
    """Configuration properties for a schema registry client.

    Values are kept as strings in a single insertion-ordered mapping. The typed
    properties are views over that mapping: they convert on read and write, and
    assigning None to any of them removes the underlying key.

    The store is not thread-safe. Build it on one thread, then hand it (or a
    ``to_dict()`` snapshot) to whatever constructs the client.

    Instances are mutable and therefore unhashable.
    """

    def __init__(self, properties: Optional[PropertySource] = None):
        """Create a configuration, optionally pre-populated.

        Args:
            properties: Mapping or iterable of (key, value) pairs, applied in order
        """
        self._properties: dict[str, str] = {}
        if properties is not None:
            items = properties.items() if isinstance(properties, Mapping) else properties
            for key, value in items:
                self.set(key, value)

    # Raw accessors

    def set(self, key: str, value: Optional[str]) -> None:
        """Set a configuration property using a string key / value pair.

        Setting None removes the property.
        """
        self.set_or_remove(key, value)

    def set_or_remove(self, key: str, value: Any) -> None:
        """Store ``value``'s string form under ``key``, or remove ``key`` if value is None.

        Args:
            key: The configuration property name
            value: The property value, or None to remove the property
        """
        if value is None:
            if self._properties.pop(key, None) is not None:
                logger.debug("Removed configuration property %s", key)
            return
        self._properties[key] = to_property_string(value)

    def remove(self, key: str) -> None:
        """Remove a property. Removing an unset property is a no-op."""
        self.set_or_remove(key, None)

    def get(self, key: str) -> Optional[str]:
        """Get a configuration property value, or None if it has not been set."""
        return self._properties.get(key)

    def get_int(self, key: str) -> Optional[int]:
        """Get a configuration property as an integer.

        Raises:
            FormatError: If the stored value is not a valid integer
        """
        raw = self.get(key)
        if raw is None:
            return None
        return parse_int(key, raw)

    def get_bool(self, key: str) -> Optional[bool]:
        """Get a configuration property as a boolean.

        Raises:
            FormatError: If the stored value is not "true" or "false"
        """
        raw = self.get(key)
        if raw is None:
            return None
        return parse_bool(key, raw)

    def _set_int(self, key: str, value: Optional[int]) -> None:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise TypeError(f"Property {key} expects an int or None, got {type(value).__name__}")
        try:
            self.set_or_remove(key, value)
        except ValueError as e:
            raise FormatError(f"Property {key} has an integer value that is too long to convert") from e

    def _set_str(self, key: str, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise TypeError(f"Property {key} expects a str or None, got {type(value).__name__}")
        self.set_or_remove(key, value)

    # Typed accessors

    @property
    def schema_registry_url(self) -> Optional[str]:
        """A comma-separated list of URLs for schema registry instances."""
        return self.get(PropertyNames.SCHEMA_REGISTRY_URL)

    @schema_registry_url.setter
    def schema_registry_url(self, value: Optional[str]) -> None:
        self._set_str(PropertyNames.SCHEMA_REGISTRY_URL, value)

    @property
    def schema_registry_request_timeout_ms(self) -> Optional[int]:
        """Timeout for requests to the schema registry in milliseconds.

        The client applies a default of 30000 when unset.
        """
        return self.get_int(PropertyNames.SCHEMA_REGISTRY_REQUEST_TIMEOUT_MS)

    @schema_registry_request_timeout_ms.setter
    def schema_registry_request_timeout_ms(self, value: Optional[int]) -> None:
        self._set_int(PropertyNames.SCHEMA_REGISTRY_REQUEST_TIMEOUT_MS, value)

    @property
    def schema_registry_max_cached_schemas(self) -> Optional[int]:
        """Maximum number of schemas the client caches locally.

        The client applies a default of 1000 when unset.
        """
        return self.get_int(PropertyNames.SCHEMA_REGISTRY_MAX_CACHED_SCHEMAS)

    @schema_registry_max_cached_schemas.setter
    def schema_registry_max_cached_schemas(self, value: Optional[int]) -> None:
        self._set_int(PropertyNames.SCHEMA_REGISTRY_MAX_CACHED_SCHEMAS, value)

    @property
    def schema_registry_basic_auth_credentials_source(self) -> Optional[str]:
        """Which property(ies) provide the basic auth credentials (USER_INFO or SASL_INHERIT)."""
        return self.get(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE)

    @schema_registry_basic_auth_credentials_source.setter
    def schema_registry_basic_auth_credentials_source(self, value: Optional[str]) -> None:
        self._set_str(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_CREDENTIALS_SOURCE, value)

    @property
    def schema_registry_basic_auth_user_info(self) -> Optional[str]:
        """Basic auth credentials in the form {username}:{password}."""
        return self.get(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO)

    @schema_registry_basic_auth_user_info.setter
    def schema_registry_basic_auth_user_info(self, value: Optional[str]) -> None:
        self._set_str(PropertyNames.SCHEMA_REGISTRY_BASIC_AUTH_USER_INFO, value)

    # Enumeration

    def entries(self) -> Iterator[tuple[str, str]]:
        """Iterate over (key, value) pairs in insertion order.

        Each call starts a new traversal of the current properties.
        """
        for key, value in self._properties.items():
            yield key, value

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def to_dict(self) -> dict[str, str]:
        """Return a detached copy of the properties."""
        return dict(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaRegistryConfig):
            return NotImplemented
        return self._properties == other._properties

    __hash__ = None

    def __repr__(self) -> str:
        shown = {
            key: "********" if key in REDACTED_PROPERTIES else value
            for key, value in self._properties.items()
        }
        return f"{type(self).__name__}({shown!r})"
