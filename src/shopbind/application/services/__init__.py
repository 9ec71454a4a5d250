"""Resource bindings built on the shared client."""

from shopbind.application.services.custom_collection_service import (
    CustomCollectionService,
)
from shopbind.application.services.metafield_service import (
    MetafieldOwnerMixin,
    MetafieldService,
)
from shopbind.application.services.resource_service import ResourceService

__all__ = [
    "CustomCollectionService",
    "MetafieldOwnerMixin",
    "MetafieldService",
    "ResourceService",
]
