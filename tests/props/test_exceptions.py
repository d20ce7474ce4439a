"""
Tests for the yamlprops exception hierarchy.
"""

import pytest

from yamlprops.exceptions import ParseError, PropsError, ResourceError
from yamlprops.origin import Origin


@pytest.mark.unit
class TestPropsError:
    """Test PropsError base class."""

    def test_message(self):
        """Test PropsError with simple message."""
        error = PropsError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}

    def test_context(self):
        """Test context is rendered after the message."""
        error = PropsError("Test error", resource="app.yml", size=12)
        assert error.context == {"resource": "app.yml", "size": 12}
        assert str(error) == "Test error (resource=app.yml, size=12)"


@pytest.mark.unit
class TestParseError:
    """Test ParseError."""

    def test_origin_added_to_context(self):
        """Test the origin is exposed and rendered as location."""
        origin = Origin("inline", 1, 2)
        error = ParseError("bad", origin=origin)

        assert error.origin is origin
        assert str(error) == "bad (location=in 'inline', line 2, column 3)"

    def test_without_origin(self):
        """Test ParseError without a location."""
        error = ParseError("bad")

        assert error.origin is None
        assert str(error) == "bad"

    @pytest.mark.parametrize("error_class", [ParseError, ResourceError])
    def test_inheritance(self, error_class):
        """Test specific errors can be caught as PropsError."""
        with pytest.raises(PropsError):
            raise error_class("failure")

    def test_location_added_after_caller_context(self):
        """Test location is rendered after keys passed by the caller."""
        error = ParseError("not utf-8", origin=Origin("inline"), position=7)

        assert error.context == {"location": "in 'inline'", "position": 7}
        assert str(error) == "not utf-8 (position=7, location=in 'inline')"
