"""
Dependency container.

Composition root wiring the repository into the application use cases.
"""
from typing import Optional

from internal.domain.repository import ProductRepository
from internal.infrastructure.catalog_api import ApiProductRepository, ProductsApiClient
from internal.usecase import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    GetProductsUseCase,
    UpdateProductUseCase,
)


class Container:
    """
    Holds one repository for its lifetime and builds use cases on demand.

    Either pass a repository (tests) or an API client to build the default
    remote-API repository from.
    """

    def __init__(
        self,
        repository: Optional[ProductRepository] = None,
        api_client: Optional[ProductsApiClient] = None,
    ) -> None:
        self._repository = repository
        self._api_client = api_client

    @property
    def repository(self) -> ProductRepository:
        """The shared product repository, created on first use."""
        if self._repository is None:
            if self._api_client is None:
                self._api_client = ProductsApiClient()
            self._repository = ApiProductRepository(self._api_client)
        return self._repository

    def create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(self.repository)

    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(self.repository)

    def get_products_use_case(self) -> GetProductsUseCase:
        return GetProductsUseCase(self.repository)

    def update_product_use_case(self) -> UpdateProductUseCase:
        return UpdateProductUseCase(self.repository)

    def delete_product_use_case(self) -> DeleteProductUseCase:
        return DeleteProductUseCase(self.repository)
