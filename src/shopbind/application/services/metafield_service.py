"""Metafield binding.

Metafields live either under an owning resource
(admin/<resource>/<id>/metafields) or on the shop itself
(admin/metafields). The owner is fixed when the service is built.
"""

from typing import TYPE_CHECKING, ClassVar

from shopbind.application.services.resource_service import ResourceService
from shopbind.domain.entities import Metafield
from shopbind.domain.options import CountOptions, GetOptions, ListOptions

if TYPE_CHECKING:
    from shopbind.infrastructure.http.client import ShopClient


class MetafieldService(ResourceService[Metafield]):
    """Metafields of one owner, or of the shop when no owner is given."""

    model = Metafield
    singular_key = "metafield"
    plural_key = "metafields"

    def __init__(
        self,
        client: "ShopClient",
        resource: str | None = None,
        resource_id: int | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client: Shared API client.
            resource: Owner resource tag, e.g. "collections".
            resource_id: Id of the owning entity.
        """
        if (resource is None) != (resource_id is None):
            raise ValueError("resource and resource_id must be given together")
        super().__init__(client)
        self.resource = resource
        self.resource_id = resource_id

    @property
    def base_path(self) -> str:
        if self.resource is None:
            return "admin/metafields"
        return f"admin/{self.resource}/{self.resource_id}/metafields"


class MetafieldOwnerMixin:
    """Metafield operations for resource services that own metafields.

    Each operation builds a MetafieldService scoped to
    (metafield_resource, owner_id) and forwards to it unchanged.
    """

    metafield_resource: ClassVar[str]
    client: "ShopClient"

    def _metafields(self, owner_id: int) -> MetafieldService:
        return MetafieldService(
            self.client, resource=self.metafield_resource, resource_id=owner_id
        )

    async def list_metafields(
        self, owner_id: int, options: ListOptions | None = None
    ) -> list[Metafield]:
        return await self._metafields(owner_id).list(options)

    async def count_metafields(
        self, owner_id: int, options: CountOptions | None = None
    ) -> int:
        return await self._metafields(owner_id).count(options)

    async def get_metafield(
        self, owner_id: int, metafield_id: int, options: GetOptions | None = None
    ) -> Metafield:
        return await self._metafields(owner_id).get(metafield_id, options)

    async def create_metafield(self, owner_id: int, metafield: Metafield) -> Metafield:
        return await self._metafields(owner_id).create(metafield)

    async def update_metafield(self, owner_id: int, metafield: Metafield) -> Metafield:
        return await self._metafields(owner_id).update(metafield)

    async def delete_metafield(self, owner_id: int, metafield_id: int) -> None:
        await self._metafields(owner_id).delete(metafield_id)
