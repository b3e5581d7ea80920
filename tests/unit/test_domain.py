"""
Unit tests for domain entities and value objects.
"""
import dataclasses

import pytest

from internal.domain.dto import ProductDTO
from internal.domain.errors import (
    DomainValidationError,
    DuplicateProductTitleError,
    InvalidDiscountPercentageError,
    InvalidMoneyError,
    InvalidProductError,
    InvalidProductIdError,
    InvalidProductTitleError,
    InvalidStockError,
    ProductNotFoundError,
)
from internal.domain.product import Product, ProductMeta
from internal.domain.value_objects import (
    DiscountPercentage,
    Money,
    ProductId,
    ProductTitle,
    Stock,
)


def _product(**overrides) -> Product:
    kwargs = dict(
        id=ProductId.create(1),
        title=ProductTitle.create("Test Product"),
        description="A test product.",
        category="beauty",
        price=Money.create(100),
        stock=Stock.create(3),
    )
    kwargs.update(overrides)
    return Product.create(**kwargs)


class TestProductId:
    """Tests for ProductId value object."""

    def test_positive_id(self):
        assert ProductId.create(1).value == 1

    @pytest.mark.parametrize("value", [0, -1, 1.5, "1", True])
    def test_invalid_id_raises_error(self, value):
        with pytest.raises(InvalidProductIdError):
            ProductId(value)

    @pytest.mark.parametrize("value", [10000, 54321, 99999])
    def test_client_id_in_range(self, value):
        product_id = ProductId.create_client_id(value)

        assert product_id.value == value
        assert product_id.is_client_generated()

    @pytest.mark.parametrize("value", [9999, 100000])
    def test_client_id_out_of_range_raises_error(self, value):
        with pytest.raises(InvalidProductIdError) as exc_info:
            ProductId.create_client_id(value)

        assert "[10000, 99999]" in str(exc_info.value)

    def test_generated_client_id_is_client_generated(self):
        for _ in range(20):
            assert ProductId.generate_client_id().is_client_generated()

    def test_server_id_is_not_client_generated(self):
        assert not ProductId.create(194).is_client_generated()

    def test_str_and_int(self):
        product_id = ProductId.create(42)

        assert str(product_id) == "42"
        assert int(product_id) == 42

    def test_is_immutable(self):
        product_id = ProductId.create(1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            product_id.value = 2


class TestProductTitle:
    """Tests for ProductTitle value object."""

    def test_title_is_normalized(self):
        title = ProductTitle.create("  Red   Lipstick \t")

        assert title.value == "Red Lipstick"
        assert str(title) == "Red Lipstick"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_blank_title_raises_error(self, value):
        with pytest.raises(InvalidProductTitleError) as exc_info:
            ProductTitle.create(value)

        assert "cannot be empty" in str(exc_info.value)

    def test_max_length_is_accepted(self):
        assert len(ProductTitle.create("x" * 200).value) == 200

    def test_too_long_title_raises_error(self):
        with pytest.raises(InvalidProductTitleError):
            ProductTitle.create("x" * 201)

    def test_length_is_checked_after_normalization(self):
        assert ProductTitle.create("  " + "x" * 200 + "  ").value == "x" * 200

    def test_equal_titles_after_normalization(self):
        assert ProductTitle.create(" a  b ") == ProductTitle.create("a b")

    def test_matches_ignores_case_and_spacing(self):
        title = ProductTitle.create("Red Lipstick")

        assert title.matches("  red   LIPSTICK")
        assert not title.matches("Red Lipstick Matte")


class TestMoney:
    """Tests for Money value object."""

    def test_create_valid_money(self):
        money = Money.create(9.99)

        assert money.amount == 9.99
        assert money.currency == "USD"

    def test_zero(self):
        assert Money.zero().amount == 0

    def test_negative_amount_raises_error(self):
        with pytest.raises(InvalidMoneyError) as exc_info:
            Money.create(-0.01)

        assert "cannot be negative" in str(exc_info.value)

    def test_negative_infinity_reports_negative(self):
        with pytest.raises(InvalidMoneyError) as exc_info:
            Money.create(float("-inf"))

        assert "cannot be negative" in str(exc_info.value)

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_amount_raises_error(self, value):
        with pytest.raises(InvalidMoneyError) as exc_info:
            Money.create(value)

        assert "must be finite" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["10", None, True])
    def test_non_number_raises_error(self, value):
        with pytest.raises(InvalidMoneyError):
            Money(value)

    def test_str(self):
        assert str(Money.create(9.5)) == "USD 9.50"


class TestStock:
    """Tests for Stock value object."""

    @pytest.mark.parametrize("value", [0, 1, 999999])
    def test_valid_stock(self, value):
        assert Stock.create(value).value == value

    def test_integral_float_is_accepted(self):
        stock = Stock.create(3.0)

        assert stock.value == 3
        assert isinstance(stock.value, int)

    def test_fractional_stock_raises_error(self):
        with pytest.raises(InvalidStockError) as exc_info:
            Stock.create(1.5)

        assert "must be an integer" in str(exc_info.value)

    def test_negative_stock_raises_error(self):
        with pytest.raises(InvalidStockError):
            Stock.create(-1)

    def test_stock_above_max_raises_error(self):
        with pytest.raises(InvalidStockError):
            Stock.create(1000000)

    def test_is_empty(self):
        assert Stock.zero().is_empty
        assert not Stock.create(1).is_empty


class TestDiscountPercentage:
    """Tests for DiscountPercentage value object."""

    @pytest.mark.parametrize("value", [0, 12.5, 100])
    def test_valid_discount(self, value):
        assert DiscountPercentage.create(value).value == value

    @pytest.mark.parametrize("value", [-0.1, 100.1, float("nan")])
    def test_out_of_range_discount_raises_error(self, value):
        with pytest.raises(InvalidDiscountPercentageError):
            DiscountPercentage.create(value)

    def test_none_is_zero(self):
        assert DiscountPercentage.none().value == 0

    def test_apply_to(self):
        discounted = DiscountPercentage.create(10).apply_to(Money.create(100))

        assert discounted == Money.create(90)

    def test_apply_to_rounds_to_cents(self):
        discounted = DiscountPercentage.create(15).apply_to(Money.create(19.99))

        assert discounted.amount == 16.99

    def test_apply_to_keeps_currency(self):
        discounted = DiscountPercentage.create(50).apply_to(Money.create(10, "EUR"))

        assert discounted.currency == "EUR"

    def test_full_discount_is_zero(self):
        assert DiscountPercentage.create(100).apply_to(Money.create(42)).amount == 0


class TestProduct:
    """Tests for Product entity."""

    def test_create_applies_defaults(self):
        product = _product()

        assert product.discount_percentage == DiscountPercentage.none()
        assert product.rating == 0
        assert product.images == []
        assert product.thumbnail == ""
        assert product.tags == []
        assert product.brand is None
        assert product.meta is None

    @pytest.mark.parametrize("description", ["", "   "])
    def test_blank_description_raises_error(self, description):
        with pytest.raises(InvalidProductError) as exc_info:
            _product(description=description)

        assert "description cannot be empty" in str(exc_info.value)

    def test_description_length_limit(self):
        assert len(_product(description="x" * 5000).description) == 5000

        with pytest.raises(InvalidProductError):
            _product(description="x" * 5001)

    def test_blank_category_raises_error(self):
        with pytest.raises(InvalidProductError) as exc_info:
            _product(category=" ")

        assert "category cannot be empty" in str(exc_info.value)

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_rating_out_of_range_raises_error(self, rating):
        with pytest.raises(InvalidProductError):
            _product(rating=rating)

    def test_product_errors_are_validation_errors(self):
        with pytest.raises(DomainValidationError):
            _product(category="")

    def test_final_price(self):
        product = _product(discount_percentage=DiscountPercentage.create(10))

        assert product.final_price == Money.create(90)

    def test_final_price_without_discount(self):
        assert _product().final_price == Money.create(100)

    def test_is_in_stock(self):
        assert _product().is_in_stock
        assert not _product(stock=Stock.zero()).is_in_stock

    def test_update_methods(self):
        product = _product()

        product.update_title(ProductTitle.create("New Title"))
        product.update_description("New description.")
        product.update_price(Money.create(50))
        product.update_category("fragrances")
        product.apply_discount(DiscountPercentage.create(20))
        product.update_stock(Stock.zero())

        assert product.title.value == "New Title"
        assert product.description == "New description."
        assert product.category == "fragrances"
        assert product.final_price == Money.create(40)
        assert not product.is_in_stock

    def test_invalid_update_leaves_product_unchanged(self):
        product = _product()

        with pytest.raises(InvalidProductError):
            product.update_description("  ")
        with pytest.raises(InvalidProductError):
            product.update_category("")

        assert product.description == "A test product."
        assert product.category == "beauty"

    def test_dto_round_trip(self, product):
        assert Product.from_dto(product.to_dto()) == product

    def test_to_dto(self, product):
        dto = product.to_dto()

        assert dto.id == 1
        assert dto.title == "Essence Mascara Lash Princess"
        assert dto.price == 100
        assert dto.discount_percentage == 10
        assert dto.meta == {
            "created_at": "2024-05-23T08:56:21.618Z",
            "updated_at": "2024-05-23T08:56:21.618Z",
        }

    def test_from_dto_defaults_missing_discount_and_rating(self):
        dto = ProductDTO(
            id=7,
            title="Plain",
            description="No discount, no rating.",
            category="misc",
            price=5,
            stock=1,
        )

        product = Product.from_dto(dto)

        assert product.discount_percentage.value == 0
        assert product.rating == 0

    def test_from_dto_rejects_invalid_data(self):
        dto = ProductDTO(
            id=7,
            title="Plain",
            description="Bad price.",
            category="misc",
            price=-5,
            stock=1,
        )

        with pytest.raises(InvalidMoneyError):
            Product.from_dto(dto)


class TestProductMeta:
    """Tests for ProductMeta."""

    def test_to_dict_omits_absent_fields(self):
        meta = ProductMeta(created_at="a", updated_at="b")

        assert meta.to_dict() == {"created_at": "a", "updated_at": "b"}

    def test_from_dict(self):
        meta = ProductMeta.from_dict(
            {"created_at": "a", "updated_at": "b", "barcode": "123"}
        )

        assert meta.barcode == "123"
        assert meta.qr_code is None


class TestProductDTO:
    """Tests for ProductDTO."""

    def test_from_dict_ignores_unknown_keys(self):
        dto = ProductDTO.from_dict({
            "id": 1,
            "title": "T",
            "description": "D",
            "category": "c",
            "price": 1,
            "stock": 1,
            "unknown": "ignored",
        })

        assert dto.id == 1
        assert not hasattr(dto, "unknown")

    def test_to_dict_skips_none(self):
        dto = ProductDTO(id=1, title="T", description="D", category="c", price=1, stock=1)

        data = dto.to_dict()

        assert "brand" not in data
        assert data["tags"] == []


class TestDomainErrors:
    """Tests for error messages."""

    def test_not_found_message(self):
        error = ProductNotFoundError(42)

        assert error.message == "Product with ID 42 not found"
        assert error.product_id == 42

    def test_duplicate_title_message(self):
        error = DuplicateProductTitleError("Red Lipstick")

        assert str(error) == 'Product with title "Red Lipstick" already exists'
