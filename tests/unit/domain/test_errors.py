"""Unit tests for domain errors."""

import pytest

from articlegroups.domain import errors


class TestInvalidArgumentError:
    """Tests for the InvalidArgumentError domain error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error records the offending field."""
        error = errors.InvalidArgumentError("description")
        assert error.field == "description"

    @staticmethod
    @pytest.mark.parametrize(
        "field, label, expected",
        [
            ("description", None, "Description cannot be empty"),
            ("name", "Group name", "Group name cannot be empty"),
            ("group_name", None, "Group name cannot be empty"),
        ],
    )
    def test_error_message(field, label, expected) -> None:
        """Test that the message uses the label, or the field name when no label is given."""
        assert str(errors.InvalidArgumentError(field, label)) == expected

    @staticmethod
    def test_is_domain_and_value_error() -> None:
        """Test that callers can catch it as a DomainError or a ValueError."""
        error = errors.InvalidArgumentError("name")
        assert isinstance(error, errors.DomainError)
        assert isinstance(error, ValueError)
