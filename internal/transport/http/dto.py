"""
Data Transfer Objects for the Product Catalog API.

Contains Pydantic models for request/response validation.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from internal.domain.product import Product
from internal.usecase.create_product import ProductFormData
from internal.usecase.update_product import ProductUpdate


# Request DTOs
class ProductCreateRequest(BaseModel):
    """Request body for creating a product."""

    title: str = Field(..., description="Product title")
    description: str = Field(..., description="Product description")
    price: float = Field(..., description="Price in USD")
    stock: int = Field(..., description="Units in stock")
    category: str = Field(..., description="Category name")
    discount_percentage: Optional[float] = Field(None, description="Discount, 0-100")
    tags: Optional[List[str]] = Field(None, description="Free-form tags")
    brand: Optional[str] = Field(None, description="Brand name")
    client_id: Optional[int] = Field(
        None,
        description="Client-generated ID; minted by the service when omitted",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Essence Mascara Lash Princess",
                "description": "Popular mascara known for its volumizing effects.",
                "price": 9.99,
                "stock": 5,
                "category": "beauty",
                "discount_percentage": 7.17,
                "tags": ["beauty", "mascara"],
                "brand": "Essence",
            }
        }

    def to_form_data(self) -> ProductFormData:
        """Convert to use case input."""
        return ProductFormData(
            title=self.title,
            description=self.description,
            price=self.price,
            stock=self.stock,
            category=self.category,
            discount_percentage=self.discount_percentage,
            tags=self.tags,
            brand=self.brand,
        )


class ProductUpdateRequest(BaseModel):
    """Request body for a partial product update."""

    title: Optional[str] = Field(None, description="Product title")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[float] = Field(None, description="Price in USD")
    discount_percentage: Optional[float] = Field(None, description="Discount, 0-100")
    stock: Optional[int] = Field(None, description="Units in stock")
    category: Optional[str] = Field(None, description="Category name")

    class Config:
        json_schema_extra = {"example": {"price": 150, "stock": 12}}

    def to_update(self) -> ProductUpdate:
        """Convert to use case input."""
        return ProductUpdate(
            title=self.title,
            description=self.description,
            price=self.price,
            discount_percentage=self.discount_percentage,
            stock=self.stock,
            category=self.category,
        )


# Product DTOs
class ProductResponse(BaseModel):
    """Product representation returned by the API."""

    id: int = Field(..., description="Product ID")
    title: str = Field(..., description="Product title")
    description: str = Field(..., description="Product description")
    category: str = Field(..., description="Category name")
    price: float = Field(..., description="Price")
    currency: str = Field("USD", description="Currency code")
    discount_percentage: float = Field(0, description="Discount, 0-100")
    final_price: float = Field(..., description="Price after discount")
    stock: int = Field(..., description="Units in stock")
    in_stock: bool = Field(..., description="Whether any unit is available")
    rating: float = Field(0, description="Rating, 0-5")
    images: List[str] = Field(default_factory=list, description="Image URLs")
    thumbnail: str = Field("", description="Thumbnail URL")
    tags: List[str] = Field(default_factory=list, description="Tags")
    brand: Optional[str] = Field(None, description="Brand name")
    sku: Optional[str] = Field(None, description="SKU")
    client_generated: bool = Field(False, description="ID minted by the client")
    meta: Optional[dict] = Field(None, description="Backend bookkeeping data")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        """Build the response from a Product entity."""
        dto = product.to_dto()
        return cls(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            category=dto.category,
            price=dto.price,
            currency=product.price.currency,
            discount_percentage=dto.discount_percentage or 0,
            final_price=product.final_price.amount,
            stock=dto.stock,
            in_stock=product.is_in_stock,
            rating=dto.rating or 0,
            images=list(dto.images),
            thumbnail=dto.thumbnail,
            tags=list(dto.tags),
            brand=dto.brand,
            sku=dto.sku,
            client_generated=product.id.is_client_generated(),
            meta=dto.meta,
        )


# Pagination DTOs
class PaginationInfo(BaseModel):
    """Pagination metadata."""

    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total_items: int = Field(..., description="Total number of items")
    total_pages: int = Field(..., description="Total number of pages")

    class Config:
        json_schema_extra = {
            "example": {"page": 1, "limit": 10, "total_items": 194, "total_pages": 20}
        }


class PaginatedResponse(BaseModel):
    """Paginated list of products."""

    data: List[ProductResponse] = Field(..., description="List of products")
    pagination: PaginationInfo = Field(..., description="Pagination information")


# Category DTOs
class CategoryDTO(BaseModel):
    """Product category."""

    slug: str = Field(..., description="Category slug used for filtering")
    name: str = Field(..., description="Category display name")


class CategoriesResponse(BaseModel):
    """Response with all categories."""

    data: List[CategoryDTO] = Field(..., description="Categories")


class ErrorResponse(BaseModel):
    """Error response body."""

    detail: str
    code: str
    request_id: Optional[str] = None
