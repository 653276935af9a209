"""
Tests for fieldtree exception classes.
"""

from fieldtree.exceptions import (
    FieldSetNameError,
    FieldTreeError,
    UnknownFieldSetError,
)


class TestUnknownFieldSetError:
    """Tests for UnknownFieldSetError."""

    def test_attributes(self):
        """Test that the name and available names are stored."""
        error = UnknownFieldSetError("project", ["issue", "sprint"])

        assert error.name == "project"
        assert error.available == ["issue", "sprint"]

    def test_message(self):
        """Test that the message lists the available field sets."""
        error = UnknownFieldSetError("project", ["issue"])

        assert str(error) == "Field set 'project' is not registered. Available field sets: ['issue']"

    def test_hierarchy(self):
        """Test that the error is both a FieldTreeError and a KeyError."""
        error = UnknownFieldSetError("project", [])

        assert isinstance(error, FieldTreeError)
        assert isinstance(error, KeyError)


class TestFieldSetNameError:
    """Tests for FieldSetNameError."""

    def test_message_and_attributes(self):
        """Test message formatting and stored attributes."""
        error = FieldSetNameError("", "must be a non-empty string")

        assert error.name == ""
        assert error.reason == "must be a non-empty string"
        assert str(error) == "Invalid field set name '': must be a non-empty string"
        assert isinstance(error, FieldTreeError)
