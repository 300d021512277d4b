"""Fake implementations for testing."""

from tests.fakes.authorizer_fake import RecordingAuthorizer
from tests.fakes.widget import Widget, WidgetDTO
from tests.fakes.widget_store_fake import CollaboratorError, FakeWidgetStore

__all__ = [
    "CollaboratorError",
    "FakeWidgetStore",
    "RecordingAuthorizer",
    "Widget",
    "WidgetDTO",
]
