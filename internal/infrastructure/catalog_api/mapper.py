"""
Product mapper.

Converts between remote API payloads (camelCase JSON) and domain objects.
"""
from typing import Any, Optional

from internal.domain.dto import ProductDTO
from internal.domain.product import Product


# API field -> DTO field, for fields whose names differ
_API_TO_DTO = {
    "discountPercentage": "discount_percentage",
    "warrantyInformation": "warranty_information",
    "shippingInformation": "shipping_information",
    "availabilityStatus": "availability_status",
    "returnPolicy": "return_policy",
    "minimumOrderQuantity": "minimum_order_quantity",
}
_DTO_TO_API = {v: k for k, v in _API_TO_DTO.items()}

_META_API_TO_DTO = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "barcode": "barcode",
    "qrCode": "qr_code",
}
_META_DTO_TO_API = {v: k for k, v in _META_API_TO_DTO.items()}


def _rename(data: dict, mapping: dict) -> dict:
    return {mapping.get(key, key): value for key, value in data.items()}


class ProductMapper:
    """
    Mapper between API payloads and Product entities.

    API-only fields (weight, dimensions, warranty and shipping information,
    availability status, reviews, return policy, minimum order quantity) are
    carried by the DTO but not by the entity, so they are lost on the way to
    the domain.
    """

    @classmethod
    def to_domain(cls, api_product: dict[str, Any]) -> Product:
        """Convert an API product payload to a Product entity."""
        return Product.from_dto(cls.api_to_dto(api_product))

    @classmethod
    def to_api(cls, product: Product) -> dict[str, Any]:
        """Convert a Product entity to an API product payload."""
        return cls.dto_to_api(product.to_dto())

    @staticmethod
    def to_form_data(product: Product) -> dict[str, Any]:
        """
        Build the POST/PUT body for a product.

        Returns:
            Form payload with title, description, price, discount, stock,
            category, tags and brand.
        """
        dto = product.to_dto()
        return {
            "title": dto.title,
            "description": dto.description,
            "price": dto.price,
            "discountPercentage": dto.discount_percentage,
            "stock": dto.stock,
            "category": dto.category,
            "tags": dto.tags,
            "brand": dto.brand,
        }

    @staticmethod
    def api_to_dto(api_product: dict[str, Any]) -> ProductDTO:
        """Convert an API product payload to a domain DTO."""
        data = _rename(api_product, _API_TO_DTO)
        if data.get("tags") is None:
            data["tags"] = []
        meta: Optional[dict] = data.get("meta")
        if meta is not None:
            data["meta"] = _rename(meta, _META_API_TO_DTO)
        return ProductDTO.from_dict(data)

    @staticmethod
    def dto_to_api(dto: ProductDTO) -> dict[str, Any]:
        """Convert a domain DTO to an API product payload."""
        data = _rename(dto.to_dict(), _DTO_TO_API)
        if dto.meta is not None:
            data["meta"] = _rename(dto.meta, _META_DTO_TO_API)
        return data
