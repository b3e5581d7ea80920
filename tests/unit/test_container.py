"""
Unit tests for the dependency container.
"""
from unittest.mock import MagicMock

from internal.infrastructure.catalog_api import ApiProductRepository, ProductsApiClient
from internal.infrastructure.container import Container
from internal.usecase import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    GetProductsUseCase,
    UpdateProductUseCase,
)


class TestContainer:
    """Tests for Container wiring."""

    def test_builds_use_cases_on_given_repository(self, mock_repository):
        container = Container(repository=mock_repository)

        use_cases = [
            container.create_product_use_case(),
            container.get_product_use_case(),
            container.get_products_use_case(),
            container.update_product_use_case(),
            container.delete_product_use_case(),
        ]

        assert [type(u) for u in use_cases] == [
            CreateProductUseCase,
            GetProductUseCase,
            GetProductsUseCase,
            UpdateProductUseCase,
            DeleteProductUseCase,
        ]
        assert all(u._repository is mock_repository for u in use_cases)

    def test_default_repository_uses_api_client(self):
        api_client = MagicMock(spec=ProductsApiClient)
        container = Container(api_client=api_client)

        repository = container.repository

        assert isinstance(repository, ApiProductRepository)
        assert container.repository is repository
