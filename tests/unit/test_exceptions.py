"""Unit tests for domain exceptions."""

from uuid import uuid4

import pytest

from sharedrive.domain.exceptions import (
    Conflict,
    HierarchyError,
    NotFound,
    PermissionDenied,
    ResourceNotFound,
    ShareDriveError,
    Unauthenticated,
    ValidationError,
)
from sharedrive.domain.value_objects import ResourceRef


@pytest.mark.parametrize(
    "exc",
    [Conflict, HierarchyError, NotFound, PermissionDenied, Unauthenticated, ValidationError],
)
def test_inherits_sharedrive_error(exc) -> None:
    assert issubclass(exc, ShareDriveError)


def test_resource_not_found_is_not_found() -> None:
    """ResourceNotFound can be handled with other NotFound errors."""
    assert issubclass(ResourceNotFound, NotFound)


def test_resource_not_found_carries_ref() -> None:
    ref = ResourceRef.folder(uuid4())

    with pytest.raises(NotFound, match=f"Folder {ref.id} not found") as exc_info:
        raise ResourceNotFound(ref)
    assert exc_info.value.ref == ref


def test_exception_message_preserved() -> None:
    msg = "You do not have the authority to manage permissions on this file"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
