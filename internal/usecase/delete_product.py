"""
Delete Product Use Case.
"""
from internal.domain.errors import ProductNotFoundError
from internal.domain.repository import ProductRepository
from internal.domain.value_objects import ProductId
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class DeleteProductUseCase:
    """Use case for deleting a product."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, product_id: int) -> None:
        """
        Execute the delete product use case.

        Args:
            product_id: Raw product ID.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        pid = ProductId.create(product_id)

        if not await self._repository.exists(pid):
            raise ProductNotFoundError(product_id)

        await self._repository.delete(pid)
        logger.info("Product deleted", product_id=product_id)
