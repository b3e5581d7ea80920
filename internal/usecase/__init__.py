"""
Use case package for the Product Catalog.

Contains the application-layer use cases.
"""
from .create_product import (
    CreateProductUseCase,
    ProductFormData,
    PLACEHOLDER_IMAGE,
)
from .delete_product import DeleteProductUseCase
from .get_product import GetProductUseCase
from .get_products import GetProductsUseCase, ProductPage
from .update_product import ProductUpdate, UpdateProductUseCase

__all__ = [
    "CreateProductUseCase",
    "ProductFormData",
    "PLACEHOLDER_IMAGE",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "GetProductsUseCase",
    "ProductPage",
    "UpdateProductUseCase",
    "ProductUpdate",
]
