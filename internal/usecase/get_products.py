"""
Get Products Use Case.

Lists products page by page, optionally filtered by category or search query.
"""
from dataclasses import dataclass, field
from typing import Optional

from internal.domain.product import Product
from internal.domain.repository import ProductList, ProductRepository
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


@dataclass
class ProductPage:
    """Output for GetProductsUseCase."""

    products: list[Product] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        """Number of pages for the current limit."""
        if self.limit <= 0:
            return 0
        return (self.total + self.limit - 1) // self.limit


class GetProductsUseCase:
    """
    Use case for fetching a page of products.

    A non-empty search query takes precedence over a category filter, which
    takes precedence over the unfiltered listing. Exactly one repository
    read happens per call.
    """

    def __init__(self, repository: ProductRepository) -> None:
        """
        Initialize the use case.

        Args:
            repository: Product repository.
        """
        self._repository = repository

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
        search_query: Optional[str] = None,
    ) -> ProductPage:
        """
        Execute the listing use case.

        Args:
            page: 1-based page number.
            limit: Page size.
            category: Optional category filter.
            search_query: Optional full-text query.

        Returns:
            The page, echoing back page and limit.
        """
        skip = (page - 1) * limit

        result: ProductList
        if search_query:
            result = await self._repository.search(search_query, limit=limit, skip=skip)
        elif category:
            result = await self._repository.find_by_category(category, limit=limit, skip=skip)
        else:
            result = await self._repository.find_all(limit=limit, skip=skip)

        logger.debug(
            "Products fetched",
            page=page,
            limit=limit,
            category=category,
            query=search_query,
            total=result.total,
        )

        return ProductPage(
            products=result.products,
            total=result.total,
            page=page,
            limit=limit,
        )
