"""Metafield entity.

Metafields are key/value annotations attached to an owning resource,
identified by (owner_resource, owner_id), or to the shop itself.
"""

from datetime import datetime
from typing import Any

from shopbind.domain.entities.base import ShopModel


class Metafield(ShopModel):
    """A metafield as sent and returned by the metafields endpoints."""

    id: int | None = None
    key: str | None = None
    value: Any = None
    value_type: str | None = None
    type: str | None = None
    namespace: str | None = None
    description: str | None = None
    owner_id: int | None = None
    owner_resource: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    admin_graphql_api_id: str | None = None
