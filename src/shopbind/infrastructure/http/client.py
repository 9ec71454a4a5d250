"""Shared HTTP client for the Admin REST API.

ShopClient owns one httpx.AsyncClient and turns each call into exactly
one HTTP request. It attaches the access token, encodes query options,
decodes JSON bodies and maps error statuses to shopbind exceptions.
It never retries and never follows pagination.
"""

from typing import Any

import httpx

from shopbind.application.services.custom_collection_service import (
    CustomCollectionService,
)
from shopbind.application.services.metafield_service import MetafieldService
from shopbind.core.config import Settings, get_settings
from shopbind.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ResponseError,
    ValidationError,
)
from shopbind.core.logging import get_logger
from shopbind.domain.options import QueryOptions

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"

_STATUS_ERRORS: dict[int, type[ResponseError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
}


def _error_message(errors: Any) -> str:
    """Flatten an error detail into a single line."""
    if isinstance(errors, str):
        return errors
    if isinstance(errors, list):
        return ", ".join(str(item) for item in errors)
    if isinstance(errors, dict):
        parts = []
        for field in sorted(errors):
            messages = errors[field]
            if isinstance(messages, list):
                parts.extend(f"{field}: {message}" for message in messages)
            else:
                parts.append(f"{field}: {messages}")
        return ", ".join(parts)
    return str(errors)


def _parse_retry_after(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def raise_for_response(response: httpx.Response) -> None:
    """Raise the shopbind exception matching an error response.

    Args:
        response: Response received from the API.

    Raises:
        ResponseError: Or one of its subclasses when the status is not 2xx.
    """
    if response.is_success:
        return

    errors: Any = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        errors = body.get("errors", body.get("error"))

    message = _error_message(errors) if errors else response.reason_phrase
    status_code = response.status_code

    if status_code == 429:
        raise RateLimitError(
            status_code,
            message,
            errors,
            retry_after=_parse_retry_after(response.headers.get("Retry-After")),
        )

    error_class = _STATUS_ERRORS.get(status_code, ResponseError)
    raise error_class(status_code, message, errors)


class ShopClient:
    """Async client for one shop.

    Resource bindings are attached as attributes and share this client:

        async with ShopClient(shop_name="my-shop", access_token="...") as client:
            collections = await client.custom_collections.list()
    """

    def __init__(
        self,
        base_url: str | None = None,
        access_token: str | None = None,
        *,
        shop_name: str | None = None,
        settings: Settings | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Explicit arguments take precedence over settings loaded from the
        environment.

        Args:
            base_url: Shop URL, e.g. https://my-shop.myshopify.com.
            access_token: Admin API access token.
            shop_name: Shop subdomain, used when base_url is not given.
            settings: Settings to read defaults from.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.
            http_client: Optional pre-built httpx client, used as is: base
                URL, headers and timeout are not applied to it, and aclose()
                does not close it.

        Raises:
            ConfigurationError: If no shop URL can be determined.
        """
        settings = settings or get_settings()

        if base_url is None and shop_name is not None:
            base_url = f"https://{shop_name}.myshopify.com"
        base_url = (base_url or settings.api_base_url or "").rstrip("/")
        if not base_url:
            raise ConfigurationError(
                "No shop URL configured. Pass base_url or shop_name, or set "
                "SHOPBIND_BASE_URL / SHOPBIND_SHOP_NAME."
            )

        self.base_url = base_url
        self.access_token = access_token or settings.access_token

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
        }
        if self.access_token:
            headers[ACCESS_TOKEN_HEADER] = self.access_token

        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=timeout or settings.timeout_seconds,
                transport=transport,
            )
            self._owns_http = True

        self.custom_collections = CustomCollectionService(self)
        self.metafields = MetafieldService(self)

    async def __aenter__(self) -> "ShopClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the shop URL, e.g. admin/custom_collections.json.
            body: JSON-serializable request body.
            params: Query parameters.

        Returns:
            The decoded JSON body, or None when the response has no content.

        Raises:
            ResponseError: If the API answers with a non-2xx status.
            httpx.HTTPError: On transport failures.
        """
        response = await self._http.request(
            method,
            path.lstrip("/"),
            json=body,
            params=params or None,
        )
        logger = get_logger(__name__)

        logger.debug(
            "API request",
            method=method,
            path=path,
            status_code=response.status_code,
            request_id=response.headers.get("X-Request-Id"),
        )

        if not response.is_success:
            logger.warning(
                "API error response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise_for_response(response)

        if not response.content:
            return None
        return response.json()

    async def get(self, path: str, options: QueryOptions | None = None) -> Any:
        """GET a path with optional query options."""
        params = options.to_params() if options is not None else None
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> None:
        """DELETE a path; any response body is discarded."""
        await self.request("DELETE", path)

    async def count(self, path: str, options: QueryOptions | None = None) -> int:
        """GET a count endpoint and return the ``count`` value."""
        data = await self.get(path, options)
        return int(data["count"])
