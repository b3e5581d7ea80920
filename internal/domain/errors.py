"""
Domain-specific exceptions.

Custom exceptions for domain validation and business rule violations.
"""


class DomainError(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message describing the issue.
        """
        self.message = message
        super().__init__(self.message)


class DomainValidationError(DomainError):
    """Exception raised when domain validation fails."""
    pass


class InvalidProductIdError(DomainValidationError):
    """Product ID is not positive or lies outside the client ID range."""
    pass


class InvalidMoneyError(DomainValidationError):
    """Money amount is negative or not finite."""
    pass


class InvalidDiscountPercentageError(DomainValidationError):
    """Discount lies outside [0, 100]."""
    pass


class InvalidProductTitleError(DomainValidationError):
    """Title is empty after normalization or too long."""
    pass


class InvalidStockError(DomainValidationError):
    """Stock is not an integer or lies outside [0, 999999]."""
    pass


class InvalidProductError(DomainValidationError):
    """Exception raised when a product entity invariant is violated."""
    pass


class ProductNotFoundError(DomainError):
    """Exception raised when a product is not found."""

    def __init__(self, product_id: int) -> None:
        """
        Initialize product not found error.

        Args:
            product_id: The ID of the product that was not found.
        """
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class DuplicateProductTitleError(DomainError):
    """Exception raised when attempting to create a product with a taken title."""

    def __init__(self, title: str) -> None:
        """
        Initialize duplicate title error.

        Args:
            title: The title that already exists.
        """
        super().__init__(f'Product with title "{title}" already exists')
        self.title = title
