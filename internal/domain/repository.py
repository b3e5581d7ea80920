"""
Product repository contract.

The domain and application layers depend only on this protocol; the concrete
implementation lives in the infrastructure layer.
"""
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .product import Product
from .value_objects import ProductId


@dataclass
class ProductList:
    """
    A page of products returned by a repository read.

    Attributes:
        products: Products on this page.
        total: Total number of matching products.
    """
    products: list[Product] = field(default_factory=list)
    total: int = 0


class ProductRepository(Protocol):
    """
    Protocol for product repository operations.

    Reads with no match return an empty ``ProductList``; ``find_by_id``
    returns None when the product is absent. Write failures propagate.
    """

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Get product by ID."""
        ...

    async def find_all(self, limit: int = 10, skip: int = 0) -> ProductList:
        """Get a page of all products."""
        ...

    async def find_by_category(
        self,
        category: str,
        limit: int = 10,
        skip: int = 0,
    ) -> ProductList:
        """Get a page of products in a category."""
        ...

    async def search(self, query: str, limit: int = 10, skip: int = 0) -> ProductList:
        """Full-text search over products."""
        ...

    async def save(self, product: Product) -> Product:
        """Create or update a product depending on whether its ID is client-generated."""
        ...

    async def delete(self, product_id: ProductId) -> None:
        """Delete product by ID."""
        ...

    async def exists(self, product_id: ProductId) -> bool:
        """Check whether a product exists."""
        ...

    async def exists_by_title(self, title: str) -> bool:
        """Check whether a product with this exact title exists (case-insensitive)."""
        ...
