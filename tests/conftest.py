"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

The resource under test is a widget resource backed by fakes:
- FakeWidgetStore supplies every accessor and mutator
- RecordingAuthorizer records each authorization check
- Tests are isolated (each test gets fresh fakes)
"""

from collections.abc import Callable

import pytest

from easyrest.application.services.resource_service import ResourceService
from easyrest.domain.resource import ResourceDescriptor, SubEntity
from tests.fakes.authorizer_fake import RecordingAuthorizer
from tests.fakes.widget import Widget, WidgetDTO
from tests.fakes.widget_store_fake import FakeWidgetStore


@pytest.fixture
def sample_widget() -> Widget:
    """Create a sample widget with parts and an internal secret."""
    return Widget(id="42", name="Sprocket", color="red", secret="s3cr3t", parts=["cog", "axle"])


@pytest.fixture
def another_widget() -> Widget:
    """Create another sample widget."""
    return Widget(id="7", name="Gear", color="blue")


@pytest.fixture
def store(sample_widget, another_widget) -> FakeWidgetStore:
    """Provide a FakeWidgetStore pre-populated with widgets."""
    return FakeWidgetStore(initial_data=[sample_widget, another_widget])


@pytest.fixture
def authorizer() -> RecordingAuthorizer:
    """Provide an authorizer that permits everything and records its calls."""
    return RecordingAuthorizer()


@pytest.fixture
def make_descriptor(store, authorizer) -> Callable[..., ResourceDescriptor]:
    """
    Provide a factory for widget descriptors with every capability set.

    Keyword arguments override descriptor fields, e.g.
    ``make_descriptor(delete=None)`` removes the delete capability.
    """

    def factory(**overrides) -> ResourceDescriptor:
        fields = dict(
            path="widgets",
            dto_type=WidgetDTO,
            find_one=store.find_one,
            find_all=store.find_all,
            find_all_paged=store.find_all_paged,
            to_dto=WidgetDTO.from_entity,
            search=store.search,
            mutate=store.mutate,
            create=store.create,
            delete=store.delete,
            sub_entities=[SubEntity(sub_path="parts", get=store.parts)],
            authorize=authorizer,
        )
        fields.update(overrides)
        return ResourceDescriptor(**fields)

    return factory


@pytest.fixture
def descriptor(make_descriptor) -> ResourceDescriptor:
    """Provide a widget descriptor with every capability set."""
    return make_descriptor()


@pytest.fixture
def service(descriptor) -> ResourceService:
    """Provide a ResourceService over the full widget descriptor."""
    return ResourceService(descriptor)
