"""
Get Product Use Case.
"""
from internal.domain.errors import ProductNotFoundError
from internal.domain.product import Product
from internal.domain.repository import ProductRepository
from internal.domain.value_objects import ProductId


class GetProductUseCase:
    """Use case for fetching a single product by ID."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, product_id: int) -> Product:
        """
        Execute the get product use case.

        Args:
            product_id: Raw product ID.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If the repository has no such product.
        """
        product = await self._repository.find_by_id(ProductId.create(product_id))
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
