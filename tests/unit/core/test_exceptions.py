"""Unit tests for the exception hierarchy."""

import pytest

from laakhay.protocol.core import ConfigurationError, ProtocolError, ValidationError


def test_configuration_error_context():
    """Test that the offending field and value are kept."""
    error = ConfigurationError("bad pattern", field="subscription_pattern", value="carrier_pigeon")

    assert str(error) == "bad pattern"
    assert error.field == "subscription_pattern"
    assert error.value == "carrier_pigeon"
    assert isinstance(error, ProtocolError)


def test_configuration_error_defaults():
    """Test optional context."""
    error = ConfigurationError("bad")

    assert error.field is None
    assert error.value is None


def test_validation_error_is_protocol_error():
    """Test the shared base class."""
    with pytest.raises(ProtocolError):
        raise ValidationError("not a mapping")
