"""
Create Product Use Case.

Turns raw form input into a validated Product and stores it.
"""
from dataclasses import dataclass
from typing import Optional

from internal.domain.errors import DuplicateProductTitleError
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


PLACEHOLDER_IMAGE = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='300' "
    "height='200'%3E%3Crect fill='%23e2e2e2' width='300' height='200'/%3E%3Ctext "
    "fill='%236b7280' font-family='sans-serif' font-size='14' x='50%25' y='50%25' "
    "text-anchor='middle' dy='.3em'%3ENo Image%3C/text%3E%3C/svg%3E"
)


@dataclass
class ProductFormData:
    """Raw product input as entered by a user."""

    title: str
    description: str
    price: float
    stock: int
    category: str
    discount_percentage: Optional[float] = None
    tags: Optional[list[str]] = None
    brand: Optional[str] = None


class CreateProductUseCase:
    """
    Use case for creating a new product.

    Validates the input through the value objects, rejects duplicate titles
    and saves the product under a client-generated ID.
    """

    def __init__(self, repository: ProductRepository) -> None:
        """
        Initialize the use case.

        Args:
            repository: Product repository for persistence.
        """
        self._repository = repository

    async def execute(
        self,
        data: ProductFormData,
        client_id: Optional[int] = None,
    ) -> Product:
        """
        Execute the create product use case.

        This method:
        1. Builds the value objects from the input
        2. Checks for a product with the same title
        3. Creates the product entity
        4. Saves it through the repository

        Args:
            data: Form input for the new product.
            client_id: Client-generated ID; a fresh one is minted when omitted.

        Returns:
            The saved product.

        Raises:
            DuplicateProductTitleError: If a product with the same title exists.
            DomainValidationError: If input validation fails.
        """
        product_id = (
            ProductId.create_client_id(client_id) if client_id is not None
            else ProductId.generate_client_id()
        )
        title = ProductTitle.create(data.title)
        price = Money.create(data.price)
        stock = Stock.create(data.stock)
        discount = (
            DiscountPercentage.create(data.discount_percentage)
            if data.discount_percentage is not None
            else DiscountPercentage.none()
        )

        if await self._repository.exists_by_title(title.value):
            logger.warning("Duplicate product title rejected", title=title.value)
            raise DuplicateProductTitleError(title.value)

        product = Product.create(
            id=product_id,
            title=title,
            description=data.description,
            category=data.category,
            price=price,
            discount_percentage=discount,
            stock=stock,
            images=[PLACEHOLDER_IMAGE],
            thumbnail=PLACEHOLDER_IMAGE,
            tags=data.tags,
            brand=data.brand,
        )

        saved = await self._repository.save(product)

        logger.info(
            "Product created",
            product_id=saved.id.value,
            title=saved.title.value,
        )
        return saved
