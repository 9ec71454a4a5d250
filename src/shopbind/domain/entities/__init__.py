"""Wire entities for the Admin API.

Entities are pydantic models whose field names match the JSON keys
used by the API.
"""

from shopbind.domain.entities.base import ShopModel
from shopbind.domain.entities.custom_collection import CustomCollection, SortOrder
from shopbind.domain.entities.image import Image
from shopbind.domain.entities.metafield import Metafield

__all__ = [
    "CustomCollection",
    "Image",
    "Metafield",
    "ShopModel",
    "SortOrder",
]
