"""Generic resource binding.

Every REST resource of the Admin API follows the same pattern: a base
path, a singular envelope key for single entities and a plural key for
lists. ResourceService maps six operations onto that pattern so each
concrete resource only declares its paths, keys and model.
"""

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from shopbind.core.exceptions import MissingIdentifierError
from shopbind.domain.entities import ShopModel
from shopbind.domain.options import CountOptions, GetOptions, ListOptions

if TYPE_CHECKING:
    from shopbind.infrastructure.http.client import ShopClient

ModelT = TypeVar("ModelT", bound=ShopModel)


class ResourceService(Generic[ModelT]):
    """Binding of one REST resource to list/count/get/create/update/delete.

    Subclasses set model, singular_key and plural_key, and either
    base_path as a class attribute or override the base_path property
    when the path depends on instance state.
    """

    model: ClassVar[type[ShopModel]]
    singular_key: ClassVar[str]
    plural_key: ClassVar[str]
    base_path: str

    def __init__(self, client: "ShopClient") -> None:
        self.client = client

    def _collection_path(self) -> str:
        return f"{self.base_path}.json"

    def _entity_path(self, resource_id: int) -> str:
        return f"{self.base_path}/{resource_id}.json"

    def _wrap(self, entity: ModelT) -> dict[str, Any]:
        return {self.singular_key: entity.to_payload()}

    def _unwrap(self, data: Any) -> ModelT:
        return self.model.model_validate(data[self.singular_key])

    async def list(self, options: ListOptions | None = None) -> list[ModelT]:
        """List entities, in the order the server returns them."""
        data = await self.client.get(self._collection_path(), options)
        return [self.model.model_validate(item) for item in data[self.plural_key]]

    async def count(self, options: CountOptions | None = None) -> int:
        """Count entities matching the given filters."""
        return await self.client.count(f"{self.base_path}/count.json", options)

    async def get(self, resource_id: int, options: GetOptions | None = None) -> ModelT:
        """Fetch one entity by id.

        Raises:
            NotFoundError: If the server has no entity with this id.
        """
        data = await self.client.get(self._entity_path(resource_id), options)
        return self._unwrap(data)

    async def create(self, entity: ModelT) -> ModelT:
        """Create an entity and return it as persisted, id included.

        Raises:
            ValidationError: If the server rejects the entity.
        """
        data = await self.client.post(self._collection_path(), self._wrap(entity))
        return self._unwrap(data)

    async def update(self, entity: ModelT) -> ModelT:
        """Update an existing entity, addressed by its id.

        Raises:
            MissingIdentifierError: If the entity has no id. No request is sent.
        """
        resource_id = getattr(entity, "id", None)
        if not resource_id:
            raise MissingIdentifierError(self.model.__name__)
        data = await self.client.put(self._entity_path(resource_id), self._wrap(entity))
        return self._unwrap(data)

    async def delete(self, resource_id: int) -> None:
        """Delete an entity by id."""
        await self.client.delete(self._entity_path(resource_id))
