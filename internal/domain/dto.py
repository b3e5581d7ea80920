"""
Product transfer object.

Flat, primitive-typed mirror of the Product aggregate used to cross the
domain/infrastructure boundary. Kept separate from the remote API payload so the
domain does not depend on the API contract.
"""
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional


@dataclass
class ProductDTO:
    """
    Product data transfer object.

    The trailing optional fields exist in API payloads but are not stored by the
    Product entity; they are dropped by ``Product.from_dto``.
    """
    id: int
    title: str
    description: str
    category: str
    price: float
    stock: int
    discount_percentage: Optional[float] = None
    rating: Optional[float] = None
    images: list[str] = field(default_factory=list)
    thumbnail: str = ""
    tags: list[str] = field(default_factory=list)
    brand: Optional[str] = None
    sku: Optional[str] = None
    meta: Optional[dict] = None

    # API-only fields
    weight: Optional[float] = None
    dimensions: Optional[dict] = None
    warranty_information: Optional[str] = None
    shipping_information: Optional[str] = None
    availability_status: Optional[str] = None
    reviews: Optional[list[dict]] = None
    return_policy: Optional[str] = None
    minimum_order_quantity: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary representation, skipping unset optionals."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductDTO":
        """
        Build a DTO from a snake_case dictionary.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
