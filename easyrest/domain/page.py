"""Generic page model for paged list collaborators."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a paged listing.

    The dispatch layer never looks inside a page: whatever the paged finder
    returns is sent to the client as is. This model is a ready-made shape for
    finders that do not bring their own.
    """

    items: list[T] = Field(default_factory=list, description="Page of results")
    total: int = Field(default=0, ge=0, description="Total number of items available")
    page: int = Field(default=0, description="Token of this page")
    size: int = Field(default=0, ge=0, description="Maximum items per page")
