"""Custom collection binding.

Maps list/count/get/create/update/delete onto admin/custom_collections
and exposes the collection's metafields under the "collections" tag.
"""

from shopbind.application.services.metafield_service import MetafieldOwnerMixin
from shopbind.application.services.resource_service import ResourceService
from shopbind.domain.entities import CustomCollection


class CustomCollectionService(MetafieldOwnerMixin, ResourceService[CustomCollection]):
    """Custom collections of a shop."""

    model = CustomCollection
    base_path = "admin/custom_collections"
    singular_key = "custom_collection"
    plural_key = "custom_collections"
    metafield_resource = "collections"
