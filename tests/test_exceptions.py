"""Tests for custom exceptions."""

import pytest
from registryconfig.exceptions import (
    RegistryConfigError,
    FormatError,
    ConfigurationError,
)


class TestExceptionHierarchy:
    """Test custom exception hierarchy."""

    def test_base_exception(self):
        """Test base RegistryConfigError exception."""
        exc = RegistryConfigError("Base error")
        assert str(exc) == "Base error"
        assert isinstance(exc, Exception)

    def test_format_error(self):
        """Test FormatError inheritance."""
        exc = FormatError("Bad value")
        assert str(exc) == "Bad value"
        assert isinstance(exc, RegistryConfigError)

    def test_configuration_error(self):
        """Test ConfigurationError inheritance."""
        exc = ConfigurationError("Bad configuration")
        assert str(exc) == "Bad configuration"
        assert isinstance(exc, RegistryConfigError)

    def test_exception_catching(self):
        """Test that specific exceptions can be caught as base class."""
        for exc in [FormatError("test"), ConfigurationError("test")]:
            try:
                raise exc
            except RegistryConfigError:
                pass
            else:
                pytest.fail(f"{type(exc).__name__} not caught as RegistryConfigError")
