"""
Product domain service.

Holds business rules that span more than one Product aggregate.
"""
from typing import Iterable

from .errors import DuplicateProductTitleError
from .product import Product


class ProductDomainService:
    """Stateless cross-aggregate product rules."""

    def validate_product_creation(
        self,
        product: Product,
        existing_products: Iterable[Product],
    ) -> None:
        """
        Check that no existing product already uses the candidate's title.

        Titles are compared case-insensitively. The caller supplies the
        candidate set; no I/O happens here.

        Args:
            product: Product about to be created.
            existing_products: Products to compare against.

        Raises:
            DuplicateProductTitleError: On the first matching title.
        """
        candidate = product.title.value.lower()
        for existing in existing_products:
            if existing.title.value.lower() == candidate:
                raise DuplicateProductTitleError(product.title.value)
