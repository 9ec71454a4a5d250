"""Typed query options for list, count and get requests.

Each model enumerates the query keys an endpoint understands. Unset
fields are left out of the query string.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class PublishedStatus(str, Enum):
    """Filter on publication state."""

    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"
    ANY = "any"


class QueryOptions(BaseModel):
    """Base for query option models."""

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> dict[str, str]:
        """Encode the set fields as query parameters.

        Sequences are joined with commas and datetimes use ISO-8601.
        """
        params: dict[str, str] = {}
        for key, value in self.model_dump(mode="json", exclude_none=True).items():
            if isinstance(value, list):
                if value:
                    params[key] = ",".join(str(item) for item in value)
            else:
                params[key] = str(value)
        return params


class CountOptions(QueryOptions):
    """Filters accepted by count endpoints."""

    title: str | None = None
    handle: str | None = None
    product_id: int | None = None
    since_id: int | None = None
    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None
    published_at_min: datetime | None = None
    published_at_max: datetime | None = None
    published_status: PublishedStatus | None = None


class ListOptions(CountOptions):
    """Filters and paging accepted by list endpoints."""

    ids: list[int] | None = None
    limit: int | None = None
    page: int | None = None
    fields: list[str] | None = None


class GetOptions(QueryOptions):
    """Options accepted when fetching a single entity."""

    fields: list[str] | None = None


class MetafieldListOptions(ListOptions):
    """List filters specific to metafields."""

    namespace: str | None = None
    key: str | None = None
    value_type: str | None = None
