"""
Value Objects for the Product domain.

Value objects are immutable and defined by their attributes.
Each one validates itself on construction, so an invalid instance cannot exist.
"""
import math
import random
from dataclasses import dataclass
from typing import Union

from config.settings import settings

from .errors import (
    InvalidDiscountPercentageError,
    InvalidMoneyError,
    InvalidProductIdError,
    InvalidProductTitleError,
    InvalidStockError,
)


Number = Union[int, float]

TITLE_MAX_LENGTH = 200
STOCK_MAX = 999999
DISCOUNT_MIN = 0
DISCOUNT_MAX = 100


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a valid quantity
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: Number) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int)


@dataclass(frozen=True)
class ProductId:
    """
    Product identifier value object.

    Server-assigned IDs are any positive integer. Client IDs are minted locally
    before the backend assigns a permanent one and fall in a reserved range.

    Attributes:
        value: The identifier.
    """
    value: int

    def __post_init__(self) -> None:
        """Validate product ID constraints."""
        if not _is_number(self.value) or not isinstance(self.value, int):
            raise InvalidProductIdError(
                f"Product ID must be an integer, got: {self.value!r}"
            )
        if self.value <= 0:
            raise InvalidProductIdError(
                f"Product ID must be positive, got: {self.value}"
            )

    @classmethod
    def create(cls, value: int) -> "ProductId":
        """Create a product ID from a server-assigned value."""
        return cls(value)

    @classmethod
    def create_client_id(cls, value: int) -> "ProductId":
        """
        Create a client-generated product ID.

        Args:
            value: Identifier inside the client ID range.

        Raises:
            InvalidProductIdError: If value lies outside the client ID range.
        """
        low, high = settings.CLIENT_ID_MIN, settings.CLIENT_ID_MAX
        if not _is_number(value) or not (low <= value <= high):
            raise InvalidProductIdError(
                f"Client ID must be in range [{low}, {high}], got: {value}"
            )
        return cls(value)

    @classmethod
    def generate_client_id(cls) -> "ProductId":
        """Mint a random client ID."""
        return cls.create_client_id(
            random.randint(settings.CLIENT_ID_MIN, settings.CLIENT_ID_MAX)
        )

    def is_client_generated(self) -> bool:
        """Check whether this ID was minted locally."""
        return settings.CLIENT_ID_MIN <= self.value <= settings.CLIENT_ID_MAX

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class ProductTitle:
    """
    Product title value object.

    The value is normalized on construction: surrounding whitespace is
    stripped and internal whitespace runs collapse to a single space.

    Attributes:
        value: The normalized title.
    """
    value: str

    def __post_init__(self) -> None:
        """Normalize and validate title constraints."""
        if not isinstance(self.value, str):
            raise InvalidProductTitleError(
                f"Product title must be a string, got: {self.value!r}"
            )
        normalized = " ".join(self.value.split())
        if not normalized:
            raise InvalidProductTitleError("Product title cannot be empty")
        if len(normalized) > TITLE_MAX_LENGTH:
            raise InvalidProductTitleError(
                f"Product title cannot exceed {TITLE_MAX_LENGTH} characters, "
                f"got: {len(normalized)}"
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, value: str) -> "ProductTitle":
        """Create a normalized product title."""
        return cls(value)

    def matches(self, other: str) -> bool:
        """Case-insensitive comparison against a raw title."""
        return self.value.lower() == " ".join(other.split()).lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """
    Money value object representing a product price.

    Attributes:
        amount: The non-negative, finite amount.
        currency: Currency code (ISO 4217).
    """
    amount: Number
    currency: str = "USD"

    def __post_init__(self) -> None:
        """Validate money constraints."""
        if not _is_number(self.amount):
            raise InvalidMoneyError(
                f"Money amount must be a number, got: {self.amount!r}"
            )
        # Negative is checked first so that -inf reports as negative.
        if self.amount < 0:
            raise InvalidMoneyError(
                f"Money amount cannot be negative, got: {self.amount}"
            )
        if not math.isfinite(self.amount):
            raise InvalidMoneyError(
                f"Money amount must be finite, got: {self.amount}"
            )

    @classmethod
    def create(cls, amount: Number, currency: str = "USD") -> "Money":
        """Create a money amount."""
        return cls(amount, currency)

    @classmethod
    def zero(cls, currency: str = "USD") -> "Money":
        """Create a zero amount in the given currency."""
        return cls(0, currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"


@dataclass(frozen=True)
class Stock:
    """
    Stock quantity value object.

    Attributes:
        value: Units in stock, an integer in [0, 999999].
    """
    value: int

    def __post_init__(self) -> None:
        """Validate stock constraints."""
        value = self.value
        if not _is_number(value) or not _is_integral(value):
            raise InvalidStockError(f"Stock must be an integer, got: {value}")
        if value < 0:
            raise InvalidStockError(f"Stock cannot be negative, got: {value}")
        if value > STOCK_MAX:
            raise InvalidStockError(f"Stock cannot exceed {STOCK_MAX}, got: {value}")
        object.__setattr__(self, "value", int(value))

    @classmethod
    def create(cls, value: int) -> "Stock":
        """Create a stock quantity."""
        return cls(value)

    @classmethod
    def zero(cls) -> "Stock":
        """Create an empty stock."""
        return cls(0)

    @property
    def is_empty(self) -> bool:
        """Whether no units are left."""
        return self.value == 0


@dataclass(frozen=True)
class DiscountPercentage:
    """
    Discount percentage value object.

    Attributes:
        value: Percentage in [0, 100].
    """
    value: Number

    def __post_init__(self) -> None:
        """Validate discount constraints."""
        if not _is_number(self.value) or not (DISCOUNT_MIN <= self.value <= DISCOUNT_MAX):
            raise InvalidDiscountPercentageError(
                f"Discount must be between {DISCOUNT_MIN} and {DISCOUNT_MAX}, "
                f"got: {self.value}"
            )

    @classmethod
    def create(cls, value: Number) -> "DiscountPercentage":
        """Create a discount percentage."""
        return cls(value)

    @classmethod
    def none(cls) -> "DiscountPercentage":
        """Create a zero discount."""
        return cls(0)

    def apply_to(self, money: Money) -> Money:
        """
        Apply the discount to an amount.

        Args:
            money: Original amount.

        Returns:
            Discounted amount rounded to cents, in the same currency.
        """
        discounted = money.amount * (1 - self.value / 100)
        return Money(round(discounted, 2), money.currency)
