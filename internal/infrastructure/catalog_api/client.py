"""
Remote catalog API client.

Async HTTP client for the DummyJSON-compatible products API, with optional
cache-aside response caching for reads.
"""
import time
from typing import Any, Optional
from urllib.parse import quote

import httpx

from config.settings import settings
from internal.infrastructure.metrics import (
    UPSTREAM_REQUEST_DURATION,
    UPSTREAM_REQUESTS_TOTAL,
)
from internal.infrastructure.redis.cache import ApiResponseCache
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class ProductsApiClient:
    """
    Client for the remote products API.

    Non-2xx responses raise ``httpx.HTTPStatusError`` after being logged;
    transport failures raise ``httpx.TransportError``. Writes invalidate the
    cached listings.
    """

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.API_TIMEOUT,
        cache: Optional[ApiResponseCache] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root URL.
            timeout: Request timeout in seconds.
            cache: Optional response cache.
            client: Pre-built httpx client (mainly for tests).
        """
        self._cache = cache
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> Any:
        """
        Send a request and decode the JSON body.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.TransportError: On network failure.
        """
        start_time = time.monotonic()
        try:
            response = await self._client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            UPSTREAM_REQUESTS_TOTAL.labels(method=method, status=e.response.status_code).inc()
            self._log_status_error(method, path, e.response)
            raise
        except httpx.TransportError as e:
            UPSTREAM_REQUESTS_TOTAL.labels(method=method, status="error").inc()
            logger.error("Network error", method=method, path=path, error=str(e))
            raise
        finally:
            UPSTREAM_REQUEST_DURATION.labels(method=method).observe(
                time.monotonic() - start_time
            )

        UPSTREAM_REQUESTS_TOTAL.labels(method=method, status=response.status_code).inc()
        return response.json()

    @staticmethod
    def _log_status_error(method: str, path: str, response: httpx.Response) -> None:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = (body.get("message") if isinstance(body, dict) else None) \
            or response.reason_phrase

        if response.status_code == 404:
            summary = "Resource not found"
        elif response.status_code == 429:
            summary = "Rate limit exceeded"
        else:
            summary = "API error"

        logger.error(
            summary,
            method=method,
            path=path,
            status_code=response.status_code,
            error=message,
        )

    async def _cached_get(
        self,
        path: str,
        params: Optional[dict] = None,
        kind: str = "list",
    ) -> Any:
        if self._cache:
            cached = await self._cache.get(path, params)
            if cached is not None:
                return cached

        data = await self._request("GET", path, params=params)

        if self._cache:
            await self._cache.set(path, data, params=params, kind=kind)
        return data

    async def get_products(self, limit: int = 10, skip: int = 0) -> dict:
        """
        Get a page of products.

        Returns:
            Payload with "products", "total", "skip", "limit".
        """
        return await self._cached_get("/products", {"limit": limit, "skip": skip})

    async def get_product(self, product_id: int) -> dict:
        """Get a single product payload by ID."""
        return await self._cached_get(f"/products/{product_id}", kind="detail")

    async def search_products(self, query: str, limit: int = 10, skip: int = 0) -> dict:
        """Search products by free text."""
        return await self._cached_get(
            "/products/search",
            {"q": query, "limit": limit, "skip": skip},
            kind="search",
        )

    async def get_categories(self) -> list:
        """Get all categories."""
        return await self._cached_get("/products/categories", kind="categories")

    async def get_products_by_category(
        self,
        category: str,
        limit: int = 10,
        skip: int = 0,
    ) -> dict:
        """Get a page of products in a category."""
        return await self._cached_get(
            f"/products/category/{quote(category, safe='')}",
            {"limit": limit, "skip": skip},
        )

    async def create_product(self, form_data: dict) -> dict:
        """
        Create a product.

        Note: DummyJSON answers with a fake record and does not persist it.
        """
        data = await self._request("POST", "/products/add", json=form_data)
        if self._cache:
            await self._cache.invalidate_product(data.get("id", 0))
        return data

    async def update_product(self, product_id: int, updates: dict) -> dict:
        """Update an existing product."""
        data = await self._request("PUT", f"/products/{product_id}", json=updates)
        if self._cache:
            await self._cache.invalidate_product(product_id)
        return data

    async def delete_product(self, product_id: int) -> dict:
        """Delete a product."""
        data = await self._request("DELETE", f"/products/{product_id}")
        if self._cache:
            await self._cache.invalidate_product(product_id)
        return data
