"""
Update Product Use Case.

Applies a partial update to an existing product through its domain methods.
"""
from dataclasses import dataclass, fields
from typing import Optional

from internal.domain.errors import ProductNotFoundError
from internal.domain.product import Product
from internal.domain.repository import ProductRepository
from internal.domain.value_objects import (
    DiscountPercentage,
    Money,
    ProductId,
    ProductTitle,
    Stock,
)
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


@dataclass
class ProductUpdate:
    """Partial product input. Fields left as None are not touched."""

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    discount_percentage: Optional[float] = None
    stock: Optional[int] = None
    category: Optional[str] = None

    def changed_fields(self) -> list[str]:
        """Names of the fields carrying a value."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


class UpdateProductUseCase:
    """Use case for updating an existing product (PATCH semantics)."""

    def __init__(self, repository: ProductRepository) -> None:
        """
        Initialize the use case.

        Args:
            repository: Product repository for persistence.
        """
        self._repository = repository

    async def execute(self, product_id: int, updates: ProductUpdate) -> Product:
        """
        Execute the update product use case.

        Args:
            product_id: Raw product ID.
            updates: Fields to change.

        Returns:
            The saved product.

        Raises:
            ProductNotFoundError: If the product does not exist.
            DomainValidationError: If an updated value is invalid.
        """
        product = await self._repository.find_by_id(ProductId.create(product_id))
        if product is None:
            raise ProductNotFoundError(product_id)

        if updates.title is not None:
            product.update_title(ProductTitle.create(updates.title))
        if updates.description is not None:
            product.update_description(updates.description)
        if updates.price is not None:
            product.update_price(Money.create(updates.price))
        if updates.discount_percentage is not None:
            product.apply_discount(DiscountPercentage.create(updates.discount_percentage))
        if updates.stock is not None:
            product.update_stock(Stock.create(updates.stock))
        if updates.category is not None:
            product.update_category(updates.category)

        saved = await self._repository.save(product)

        logger.info(
            "Product updated",
            product_id=product_id,
            fields=updates.changed_fields(),
        )
        return saved
