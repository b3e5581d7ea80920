"""
Remote catalog API infrastructure package.
"""
from .client import ProductsApiClient
from .mapper import ProductMapper
from .repository import ApiProductRepository

__all__ = ["ApiProductRepository", "ProductMapper", "ProductsApiClient"]
