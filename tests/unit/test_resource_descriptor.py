"""Unit tests for the ResourceDescriptor declaration.

Tests invariants enforced at construction time and the capability flags
derived from the optional functions.
"""

import dataclasses

import pytest

from easyrest.domain.exceptions import DomainException, InvalidResourceDescriptorException
from easyrest.domain.resource import Action, ResourceDescriptor, SubEntity

pytestmark = pytest.mark.unit


def test_descriptor_with_all_capabilities(descriptor):
    """Test that every capability flag is set when all functions are supplied."""
    assert descriptor.can_search
    assert descriptor.can_create
    assert descriptor.can_mutate
    assert descriptor.can_delete


@pytest.mark.parametrize(
    "field_name, flag",
    [
        ("search", "can_search"),
        ("create", "can_create"),
        ("mutate", "can_mutate"),
        ("delete", "can_delete"),
    ],
)
def test_missing_function_clears_only_its_flag(make_descriptor, field_name, flag):
    """Test that each optional function governs exactly one capability."""
    descriptor = make_descriptor(**{field_name: None})

    assert getattr(descriptor, flag) is False
    others = {"can_search", "can_create", "can_mutate", "can_delete"} - {flag}
    assert all(getattr(descriptor, other) for other in others)


def test_minimal_descriptor_defaults(store):
    """Test that optional fields default to absent."""
    descriptor = ResourceDescriptor(
        path="widgets",
        dto_type=dict,
        find_one=store.find_one,
        find_all=store.find_all,
        find_all_paged=store.find_all_paged,
        to_dto=lambda widget: {"id": widget.id},
    )

    assert descriptor.search is None
    assert descriptor.authorize is None
    assert descriptor.sub_entities == ()
    assert not (descriptor.can_create or descriptor.can_mutate or descriptor.can_delete)


def test_descriptor_is_immutable(descriptor):
    """Test that a descriptor cannot be changed after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.delete = None  # type: ignore[misc]


def test_sub_entities_are_frozen_as_tuple(make_descriptor, store):
    """Test that a list of sub-entities is stored as a tuple, order kept."""
    subs = [
        SubEntity(sub_path="parts", get=store.parts),
        SubEntity(sub_path="owners", get=lambda item: []),
    ]

    descriptor = make_descriptor(sub_entities=subs)
    subs.append(SubEntity(sub_path="late", get=lambda item: []))

    assert isinstance(descriptor.sub_entities, tuple)
    assert [s.sub_path for s in descriptor.sub_entities] == ["parts", "owners"]


@pytest.mark.parametrize("path", ["", "   ", "widgets/extra", "/widgets"])
def test_invalid_path_raises_error(make_descriptor, path):
    """Test that an empty or multi-segment path is rejected."""
    with pytest.raises(InvalidResourceDescriptorException) as exc_info:
        make_descriptor(path=path)

    assert exc_info.value.error_code == "INVALID_RESOURCE_DESCRIPTOR"
    assert isinstance(exc_info.value, DomainException)


def test_duplicate_sub_path_raises_error(make_descriptor, store):
    """Test that two sub-entities cannot share a path."""
    with pytest.raises(InvalidResourceDescriptorException) as exc_info:
        make_descriptor(
            sub_entities=[
                SubEntity(sub_path="parts", get=store.parts),
                SubEntity(sub_path="parts", get=store.parts),
            ]
        )

    assert "Duplicate" in exc_info.value.message


@pytest.mark.parametrize("sub_path", ["", "a/b"])
def test_invalid_sub_path_raises_error(make_descriptor, store, sub_path):
    """Test that an empty or multi-segment sub path is rejected."""
    with pytest.raises(InvalidResourceDescriptorException):
        make_descriptor(sub_entities=[SubEntity(sub_path=sub_path, get=store.parts)])


def test_action_values():
    """Test the action tags handed to authorization predicates."""
    assert [action.value for action in Action] == [
        "get_all",
        "get_one",
        "mutate",
        "create",
        "delete",
    ]
