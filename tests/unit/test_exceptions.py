"""Unit tests for domain exceptions."""

import pytest

from roleperm.domain.exceptions import InvalidArgumentError, NotFoundError, RolePermError


def test_not_found_inherits_roleperm_error() -> None:
    """NotFoundError is a subclass of RolePermError."""
    assert issubclass(NotFoundError, RolePermError)


def test_invalid_argument_inherits_roleperm_error_and_value_error() -> None:
    assert issubclass(InvalidArgumentError, RolePermError)
    assert issubclass(InvalidArgumentError, ValueError)


def test_not_found_message_and_attributes() -> None:
    err = NotFoundError("Permission", "posts.edit")
    assert str(err) == "Permission not found: posts.edit"
    assert err.entity == "Permission"
    assert err.key == "posts.edit"


def test_raise_not_found_catchable_as_roleperm_error() -> None:
    with pytest.raises(RolePermError):
        raise NotFoundError("Permission", 12)


def test_invalid_argument_message_preserved() -> None:
    msg = "Unsupported permission reference type: float"
    with pytest.raises(InvalidArgumentError, match=msg):
        raise InvalidArgumentError(msg)
