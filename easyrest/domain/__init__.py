"""Domain layer - resource declarations and their invariants."""

from easyrest.domain.page import Page
from easyrest.domain.resource import Action, ResourceDescriptor, SubEntity

__all__ = ["Action", "Page", "ResourceDescriptor", "SubEntity"]
