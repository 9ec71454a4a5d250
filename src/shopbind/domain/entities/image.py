"""Image entity attached to collections."""

from datetime import datetime

from shopbind.domain.entities.base import ShopModel


class Image(ShopModel):
    """Image reference of a collection.

    When creating an image, send either a public ``src`` URL or a base64
    ``attachment`` together with a ``filename``.
    """

    src: str | None = None
    alt: str | None = None
    width: int | None = None
    height: int | None = None
    created_at: datetime | None = None
    attachment: str | None = None
    filename: str | None = None
