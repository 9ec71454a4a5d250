"""Base model for entities exchanged with the Admin API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ShopModel(BaseModel):
    """Pydantic base for wire entities.

    Unknown keys in server responses are ignored. Payloads built with
    to_payload() contain only the fields that were explicitly set, so an
    entity decoded from a response dumps back to the same keys.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize the fields that were set to a JSON-ready dict."""
        return self.model_dump(mode="json", exclude_unset=True)
