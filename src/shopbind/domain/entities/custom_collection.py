"""Custom collection entity.

A custom collection is a manually curated grouping of products. The
server assigns the id on creation; it never changes afterwards.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from shopbind.domain.entities.base import ShopModel
from shopbind.domain.entities.image import Image
from shopbind.domain.entities.metafield import Metafield


class SortOrder(str, Enum):
    """Order in which products appear in a collection."""

    ALPHA_ASC = "alpha-asc"
    ALPHA_DESC = "alpha-desc"
    BEST_SELLING = "best-selling"
    CREATED = "created"
    CREATED_DESC = "created-desc"
    MANUAL = "manual"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"


class CustomCollection(ShopModel):
    """Custom collection as exchanged under the custom_collection envelope.

    Attributes:
        id: Server-assigned identifier, None until created.
        handle: URL-safe name, generated from the title when omitted.
        title: Collection title.
        updated_at: Last modification time.
        body_html: Description as HTML.
        sort_order: Product ordering inside the collection.
        template_suffix: Alternate theme template, if any.
        image: Collection image.
        published: Whether the collection is visible.
        published_at: Publication time.
        published_scope: Where the collection is published (e.g. "web").
        metafields: Metafields to attach on create; never serialized when empty.
    """

    id: int | None = None
    handle: str | None = None
    title: str | None = None
    updated_at: datetime | None = None
    body_html: str | None = None
    # Known values parse to SortOrder, unknown ones stay plain strings
    sort_order: Annotated[SortOrder | str | None, Field(union_mode="left_to_right")] = None
    template_suffix: str | None = None
    image: Image | None = None
    published: bool | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    metafields: list[Metafield] | None = None

    @model_serializer(mode="wrap")
    def drop_empty_metafields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("metafields"):
            data.pop("metafields", None)
        return data
