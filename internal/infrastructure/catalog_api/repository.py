"""
Remote API Product Repository.

Implements the repository pattern for Product on top of the remote catalog API.
"""
from typing import Optional

import httpx

from config.settings import settings
from internal.domain.product import Product
from internal.domain.repository import ProductList
from internal.domain.value_objects import ProductId, ProductTitle
from internal.infrastructure.metrics import REPOSITORY_OPERATIONS_TOTAL
from pkg.logger.logger import get_logger

from .client import ProductsApiClient
from .mapper import ProductMapper


logger = get_logger(__name__)


def _is_not_found(error: httpx.HTTPError) -> bool:
    return (
        isinstance(error, httpx.HTTPStatusError)
        and error.response.status_code == 404
    )


class ApiProductRepository:
    """
    Remote API implementation of the Product Repository.

    Only a 404 is turned into "absent"; every other failure is logged and
    re-raised to the caller.
    """

    def __init__(
        self,
        client: ProductsApiClient,
        title_lookup_limit: int = settings.TITLE_LOOKUP_LIMIT,
    ) -> None:
        """
        Initialize the repository.

        Args:
            client: Remote catalog API client.
            title_lookup_limit: Search page size used by exists_by_title.
        """
        self._client = client
        self._title_lookup_limit = title_lookup_limit

    def _failed(self, operation: str, error: Exception, **fields) -> None:
        REPOSITORY_OPERATIONS_TOTAL.labels(operation=operation, status="error").inc()
        logger.error(
            f"Error during {operation}",
            operation=operation,
            error=str(error),
            **fields,
        )

    def _succeeded(self, operation: str) -> None:
        REPOSITORY_OPERATIONS_TOTAL.labels(operation=operation, status="success").inc()

    @staticmethod
    def _to_list(payload: dict) -> ProductList:
        products = [ProductMapper.to_domain(p) for p in payload.get("products", [])]
        return ProductList(products=products, total=payload.get("total", 0))

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        try:
            payload = await self._client.get_product(product_id.value)
        except httpx.HTTPError as e:
            if _is_not_found(e):
                REPOSITORY_OPERATIONS_TOTAL.labels(
                    operation="find_by_id", status="not_found"
                ).inc()
                return None
            self._failed("find_by_id", e, product_id=product_id.value)
            raise

        self._succeeded("find_by_id")
        return ProductMapper.to_domain(payload)

    async def find_all(self, limit: int = 10, skip: int = 0) -> ProductList:
        """Get a page of all products."""
        try:
            payload = await self._client.get_products(limit=limit, skip=skip)
        except httpx.HTTPError as e:
            self._failed("find_all", e, limit=limit, skip=skip)
            raise

        self._succeeded("find_all")
        return self._to_list(payload)

    async def find_by_category(
        self,
        category: str,
        limit: int = 10,
        skip: int = 0,
    ) -> ProductList:
        """Get a page of products in a category."""
        try:
            payload = await self._client.get_products_by_category(
                category, limit=limit, skip=skip
            )
        except httpx.HTTPError as e:
            self._failed("find_by_category", e, category=category)
            raise

        self._succeeded("find_by_category")
        return self._to_list(payload)

    async def search(self, query: str, limit: int = 10, skip: int = 0) -> ProductList:
        """Search products by free text."""
        try:
            payload = await self._client.search_products(query, limit=limit, skip=skip)
        except httpx.HTTPError as e:
            self._failed("search", e, query=query)
            raise

        self._succeeded("search")
        return self._to_list(payload)

    async def save(self, product: Product) -> Product:
        """
        Create or update a product.

        Products with a client-generated ID have never reached the backend
        and are created; all others are updated in place. The remote API
        does not persist writes, so the domain product itself is returned.
        """
        form_data = ProductMapper.to_form_data(product)
        try:
            if product.id.is_client_generated():
                await self._client.create_product(form_data)
            else:
                await self._client.update_product(product.id.value, form_data)
        except httpx.HTTPError as e:
            self._failed("save", e, product_id=product.id.value)
            raise

        self._succeeded("save")
        return product

    async def delete(self, product_id: ProductId) -> None:
        """Delete a product by ID."""
        try:
            await self._client.delete_product(product_id.value)
        except httpx.HTTPError as e:
            self._failed("delete", e, product_id=product_id.value)
            raise

        self._succeeded("delete")

    async def exists(self, product_id: ProductId) -> bool:
        """Check whether a product exists."""
        return await self.find_by_id(product_id) is not None

    async def exists_by_title(self, title: str) -> bool:
        """
        Check whether a product with this exact title exists.

        Uses the search endpoint, then compares titles case-insensitively.
        """
        wanted = ProductTitle.create(title)
        try:
            payload = await self._client.search_products(
                wanted.value, limit=self._title_lookup_limit, skip=0
            )
        except httpx.HTTPError as e:
            self._failed("exists_by_title", e, title=wanted.value)
            raise

        self._succeeded("exists_by_title")
        return any(
            wanted.matches(p.get("title", ""))
            for p in payload.get("products", [])
        )

    async def list_categories(self) -> list[dict]:
        """
        Get all categories.

        Returns:
            Categories as {"slug", "name"} dicts.
        """
        try:
            payload = await self._client.get_categories()
        except httpx.HTTPError as e:
            self._failed("list_categories", e)
            raise

        self._succeeded("list_categories")
        categories = []
        for item in payload:
            if isinstance(item, dict):
                categories.append({"slug": item.get("slug", ""), "name": item.get("name", "")})
            else:
                categories.append({"slug": str(item), "name": str(item)})
        return categories
