"""
Domain model for Product.

This module contains the core domain entities following DDD principles.
"""
from dataclasses import dataclass, field
from typing import Optional

from .dto import ProductDTO
from .errors import InvalidProductError
from .value_objects import DiscountPercentage, Money, ProductId, ProductTitle, Stock


DESCRIPTION_MAX_LENGTH = 5000
RATING_MIN = 0
RATING_MAX = 5


@dataclass(frozen=True)
class ProductMeta:
    """
    Bookkeeping data carried along with a product. Not validated.

    Attributes:
        created_at: Creation timestamp as provided by the backend.
        updated_at: Last update timestamp as provided by the backend.
        barcode: Optional barcode.
        qr_code: Optional QR code URL.
    """
    created_at: str
    updated_at: str
    barcode: Optional[str] = None
    qr_code: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        data = {"created_at": self.created_at, "updated_at": self.updated_at}
        if self.barcode is not None:
            data["barcode"] = self.barcode
        if self.qr_code is not None:
            data["qr_code"] = self.qr_code
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ProductMeta":
        """Build from a dictionary representation."""
        return cls(
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            barcode=data.get("barcode"),
            qr_code=data.get("qr_code"),
        )


@dataclass
class Product:
    """
    Product is the aggregate root for catalog operations.

    Title, description, category, price, discount and stock change only
    through the domain methods below; the remaining fields are fixed at
    creation. List attributes are live and must be treated as read-only.

    Attributes:
        id: Product identifier.
        title: Normalized product title.
        description: Free text, 1..5000 characters.
        category: Category name.
        price: Product price.
        stock: Units in stock.
        discount_percentage: Applied discount.
        rating: Average rating in [0, 5].
        images: Image URLs.
        thumbnail: Thumbnail URL.
        tags: Free-form tags.
        brand: Optional brand name.
        sku: Optional stock keeping unit.
        meta: Optional backend bookkeeping data.
    """
    id: ProductId
    title: ProductTitle
    description: str
    category: str
    price: Money
    stock: Stock
    discount_percentage: DiscountPercentage = field(default_factory=DiscountPercentage.none)
    rating: float = 0
    images: list[str] = field(default_factory=list)
    thumbnail: str = ""
    tags: list[str] = field(default_factory=list)
    brand: Optional[str] = None
    sku: Optional[str] = None
    meta: Optional[ProductMeta] = None

    def __post_init__(self) -> None:
        """Validate domain invariants after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate domain invariants.

        Raises:
            InvalidProductError: If validation fails.
        """
        self._check_description(self.description)
        self._check_category(self.category)
        if not (RATING_MIN <= self.rating <= RATING_MAX):
            raise InvalidProductError(
                f"Rating must be between {RATING_MIN} and {RATING_MAX}, got: {self.rating}"
            )

    @staticmethod
    def _check_description(description: str) -> None:
        if not description or not description.strip():
            raise InvalidProductError("Product description cannot be empty")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise InvalidProductError(
                f"Product description cannot exceed {DESCRIPTION_MAX_LENGTH} characters, "
                f"got: {len(description)}"
            )

    @staticmethod
    def _check_category(category: str) -> None:
        if not category or not category.strip():
            raise InvalidProductError("Product category cannot be empty")

    @classmethod
    def create(
        cls,
        id: ProductId,
        title: ProductTitle,
        description: str,
        category: str,
        price: Money,
        stock: Stock,
        discount_percentage: Optional[DiscountPercentage] = None,
        rating: Optional[float] = None,
        images: Optional[list[str]] = None,
        thumbnail: Optional[str] = None,
        tags: Optional[list[str]] = None,
        brand: Optional[str] = None,
        sku: Optional[str] = None,
        meta: Optional[ProductMeta] = None,
    ) -> "Product":
        """
        Create a product, filling in defaults for absent optional fields.

        Raises:
            InvalidProductError: If description, category or rating are invalid.
        """
        return cls(
            id=id,
            title=title,
            description=description,
            category=category,
            price=price,
            stock=stock,
            discount_percentage=(
                discount_percentage if discount_percentage is not None
                else DiscountPercentage.none()
            ),
            rating=rating if rating is not None else 0,
            images=images if images is not None else [],
            thumbnail=thumbnail if thumbnail is not None else "",
            tags=tags if tags is not None else [],
            brand=brand,
            sku=sku,
            meta=meta,
        )

    # Domain methods

    def update_title(self, title: ProductTitle) -> None:
        """Replace the title."""
        self.title = title

    def update_description(self, description: str) -> None:
        """
        Replace the description.

        Raises:
            InvalidProductError: If the description is empty or too long.
        """
        self._check_description(description)
        self.description = description

    def update_price(self, price: Money) -> None:
        """Replace the price."""
        self.price = price

    def update_category(self, category: str) -> None:
        """
        Replace the category.

        Raises:
            InvalidProductError: If the category is empty.
        """
        self._check_category(category)
        self.category = category

    def apply_discount(self, discount: DiscountPercentage) -> None:
        """Replace the discount."""
        self.discount_percentage = discount

    def update_stock(self, stock: Stock) -> None:
        """Replace the stock."""
        self.stock = stock

    @property
    def final_price(self) -> Money:
        """Price after discount."""
        return self.discount_percentage.apply_to(self.price)

    @property
    def is_in_stock(self) -> bool:
        """Whether at least one unit is available."""
        return not self.stock.is_empty

    # Boundary conversion

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> "Product":
        """
        Rehydrate a product from its transfer object.

        Missing discount and rating default to 0. API-only fields are dropped.
        """
        return cls.create(
            id=ProductId.create(dto.id),
            title=ProductTitle.create(dto.title),
            description=dto.description,
            category=dto.category,
            price=Money.create(dto.price),
            stock=Stock.create(dto.stock),
            discount_percentage=DiscountPercentage.create(dto.discount_percentage or 0),
            rating=dto.rating or 0,
            images=dto.images,
            thumbnail=dto.thumbnail,
            tags=dto.tags,
            brand=dto.brand,
            sku=dto.sku,
            meta=ProductMeta.from_dict(dto.meta) if dto.meta is not None else None,
        )

    def to_dto(self) -> ProductDTO:
        """Export the product to its transfer object."""
        return ProductDTO(
            id=self.id.value,
            title=self.title.value,
            description=self.description,
            category=self.category,
            price=self.price.amount,
            stock=self.stock.value,
            discount_percentage=self.discount_percentage.value,
            rating=self.rating,
            images=self.images,
            thumbnail=self.thumbnail,
            tags=self.tags,
            brand=self.brand,
            sku=self.sku,
            meta=self.meta.to_dict() if self.meta is not None else None,
        )
