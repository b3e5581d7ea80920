"""
Domain package for the Product Catalog.

Contains domain entities, value objects, services and domain errors.
"""
from .dto import ProductDTO
from .product import Product, ProductMeta
from .repository import ProductList, ProductRepository
from .services import ProductDomainService
from .value_objects import (
    DiscountPercentage,
    Money,
    ProductId,
    ProductTitle,
    Stock,
)
from .errors import (
    DomainError,
    DomainValidationError,
    DuplicateProductTitleError,
    InvalidDiscountPercentageError,
    InvalidMoneyError,
    InvalidProductError,
    InvalidProductIdError,
    InvalidProductTitleError,
    InvalidStockError,
    ProductNotFoundError,
)

__all__ = [
    "Product",
    "ProductMeta",
    "ProductDTO",
    "ProductList",
    "ProductRepository",
    "ProductDomainService",
    # Value objects
    "DiscountPercentage",
    "Money",
    "ProductId",
    "ProductTitle",
    "Stock",
    # Errors
    "DomainError",
    "DomainValidationError",
    "DuplicateProductTitleError",
    "InvalidDiscountPercentageError",
    "InvalidMoneyError",
    "InvalidProductError",
    "InvalidProductIdError",
    "InvalidProductTitleError",
    "InvalidStockError",
    "ProductNotFoundError",
]
