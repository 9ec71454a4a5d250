"""shopbind - typed async client for a storefront Admin REST API.

Binds the custom collection resource and its metafields to plain
Python calls over a shared HTTP client.
"""

__version__ = "0.1.0"

from shopbind.infrastructure.http.client import ShopClient

__all__ = ["ShopClient", "__version__"]
