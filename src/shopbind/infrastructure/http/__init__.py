"""HTTP transport for the Admin API."""

from shopbind.infrastructure.http.client import ShopClient, raise_for_response

__all__ = ["ShopClient", "raise_for_response"]
