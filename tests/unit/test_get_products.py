"""
Unit tests for the product read use cases.
"""
import pytest
from unittest.mock import AsyncMock

from internal.domain.errors import InvalidProductIdError, ProductNotFoundError
from internal.domain.repository import ProductList
from internal.domain.value_objects import ProductId
from internal.usecase.get_product import GetProductUseCase
from internal.usecase.get_products import GetProductsUseCase, ProductPage


class TestGetProductUseCase:
    """Tests for GetProductUseCase."""

    @pytest.mark.asyncio
    async def test_execute_returns_product(self, mock_repository, product):
        mock_repository.find_by_id = AsyncMock(return_value=product)
        use_case = GetProductUseCase(repository=mock_repository)

        result = await use_case.execute(1)

        assert result is product
        mock_repository.find_by_id.assert_awaited_once_with(ProductId(1))

    @pytest.mark.asyncio
    async def test_missing_product_raises_not_found(self, mock_repository):
        use_case = GetProductUseCase(repository=mock_repository)

        with pytest.raises(ProductNotFoundError) as exc_info:
            await use_case.execute(404)

        assert exc_info.value.message == "Product with ID 404 not found"

    @pytest.mark.asyncio
    async def test_invalid_id_raises_before_lookup(self, mock_repository):
        use_case = GetProductUseCase(repository=mock_repository)

        with pytest.raises(InvalidProductIdError):
            await use_case.execute(0)

        mock_repository.find_by_id.assert_not_called()


class TestGetProductsUseCase:
    """Tests for GetProductsUseCase."""

    @pytest.mark.asyncio
    async def test_execute_lists_all_products(self, mock_repository, product):
        """Test that no filter lists everything with the right offset."""
        mock_repository.find_all = AsyncMock(
            return_value=ProductList(products=[product], total=194)
        )
        use_case = GetProductsUseCase(repository=mock_repository)

        result = await use_case.execute(page=3, limit=20)

        assert isinstance(result, ProductPage)
        assert result.products == [product]
        assert result.total == 194
        assert result.page == 3
        assert result.limit == 20
        assert result.total_pages == 10

        call_kwargs = mock_repository.find_all.call_args.kwargs
        assert call_kwargs["limit"] == 20
        assert call_kwargs["skip"] == 40

    @pytest.mark.asyncio
    async def test_defaults(self, mock_repository):
        use_case = GetProductsUseCase(repository=mock_repository)

        result = await use_case.execute()

        assert result.page == 1
        assert result.limit == 10
        assert result.products == []
        assert result.total_pages == 0
        call_kwargs = mock_repository.find_all.call_args.kwargs
        assert call_kwargs["skip"] == 0

    @pytest.mark.asyncio
    async def test_category_filter(self, mock_repository):
        use_case = GetProductsUseCase(repository=mock_repository)

        await use_case.execute(page=2, limit=5, category="beauty")

        mock_repository.find_by_category.assert_awaited_once_with("beauty", limit=5, skip=5)
        mock_repository.find_all.assert_not_called()
        mock_repository.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_takes_precedence_over_category(self, mock_repository):
        use_case = GetProductsUseCase(repository=mock_repository)

        await use_case.execute(category="beauty", search_query="phone")

        mock_repository.search.assert_awaited_once_with("phone", limit=10, skip=0)
        mock_repository.find_by_category.assert_not_called()
        mock_repository.find_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_filters_fall_back_to_listing(self, mock_repository):
        use_case = GetProductsUseCase(repository=mock_repository)

        await use_case.execute(category="", search_query="")

        mock_repository.find_all.assert_awaited_once()
        mock_repository.search.assert_not_called()
        mock_repository.find_by_category.assert_not_called()

    @pytest.mark.asyncio
    async def test_repository_failure_propagates(self, mock_repository):
        mock_repository.find_all = AsyncMock(side_effect=RuntimeError("boom"))
        use_case = GetProductsUseCase(repository=mock_repository)

        with pytest.raises(RuntimeError):
            await use_case.execute()


class TestProductPage:
    """Tests for ProductPage."""

    @pytest.mark.parametrize(
        "total, limit, pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (194, 30, 7)],
    )
    def test_total_pages(self, total, limit, pages):
        assert ProductPage(total=total, limit=limit).total_pages == pages
