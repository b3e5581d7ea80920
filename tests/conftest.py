"""
Pytest configuration and fixtures.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from internal.domain.product import Product, ProductMeta
from internal.domain.repository import ProductList
from internal.domain.value_objects import (
    DiscountPercentage,
    Money,
    ProductId,
    ProductTitle,
    Stock,
)
from internal.usecase.create_product import ProductFormData


@pytest.fixture
def api_product_data():
    """Sample remote API product payload (camelCase)."""
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "Popular mascara known for its volumizing and lengthening effects.",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 10,
        "rating": 4.94,
        "stock": 5,
        "tags": ["beauty", "mascara"],
        "brand": "Essence",
        "sku": "RCH45Q1A",
        "weight": 2,
        "dimensions": {"width": 23.17, "height": 14.43, "depth": 28.01},
        "warrantyInformation": "1 month warranty",
        "shippingInformation": "Ships in 1 month",
        "availabilityStatus": "Low Stock",
        "reviews": [{"rating": 2, "comment": "Very unhappy with my purchase!"}],
        "returnPolicy": "30 days return policy",
        "minimumOrderQuantity": 24,
        "meta": {
            "createdAt": "2024-05-23T08:56:21.618Z",
            "updatedAt": "2024-05-23T08:56:21.618Z",
            "barcode": "9164035109868",
            "qrCode": "https://assets.dummyjson.com/public/qr-code.png",
        },
        "images": ["https://cdn.dummyjson.com/products/images/beauty/1.png"],
        "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/thumbnail.png",
    }


@pytest.fixture
def product():
    """A server-assigned product."""
    return Product.create(
        id=ProductId.create(1),
        title=ProductTitle.create("Essence Mascara Lash Princess"),
        description="Popular mascara known for its volumizing effects.",
        category="beauty",
        price=Money.create(100),
        stock=Stock.create(5),
        discount_percentage=DiscountPercentage.create(10),
        rating=4.5,
        tags=["beauty"],
        brand="Essence",
        sku="RCH45Q1A",
        meta=ProductMeta(
            created_at="2024-05-23T08:56:21.618Z",
            updated_at="2024-05-23T08:56:21.618Z",
        ),
    )


@pytest.fixture
def form_data():
    """Valid create form input."""
    return ProductFormData(
        title="  Red   Lipstick ",
        description="Creamy red lipstick.",
        price=12.5,
        stock=40,
        category="beauty",
        discount_percentage=5,
        tags=["lipstick"],
        brand="Chic Cosmetics",
    )


@pytest.fixture
def mock_repository():
    """Repository double with every protocol method as an AsyncMock."""
    repository = MagicMock()
    repository.find_by_id = AsyncMock(return_value=None)
    repository.find_all = AsyncMock(return_value=ProductList())
    repository.find_by_category = AsyncMock(return_value=ProductList())
    repository.search = AsyncMock(return_value=ProductList())
    repository.save = AsyncMock(side_effect=lambda p: p)
    repository.delete = AsyncMock(return_value=None)
    repository.exists = AsyncMock(return_value=False)
    repository.exists_by_title = AsyncMock(return_value=False)
    repository.list_categories = AsyncMock(return_value=[])
    return repository
