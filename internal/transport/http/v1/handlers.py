"""
FastAPI HTTP Handlers for Product Catalog API v1.

Implements REST endpoints for product catalog operations.
"""

from typing import NoReturn, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from internal.domain.errors import (
    DomainError,
    DomainValidationError,
    DuplicateProductTitleError,
    ProductNotFoundError,
)
from internal.infrastructure.container import Container
from internal.transport.http.dto import (
    CategoriesResponse,
    CategoryDTO,
    ErrorResponse,
    PaginatedResponse,
    PaginationInfo,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from pkg.logger.logger import get_logger

logger = get_logger(__name__)


router = APIRouter(prefix="/api/v1", tags=["products"])


# Dependency injection container (simplified)
class Dependencies:
    """Container for handler dependencies."""

    container: Optional[Container] = None


_deps = Dependencies()


def get_container() -> Container:
    """Get the dependency container."""
    if _deps.container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return _deps.container


def set_dependencies(container: Optional[Container]) -> None:
    """
    Set handler dependencies.

    Called during application startup; pass None on shutdown.
    """
    _deps.container = container


def _raise_http_error(error: Exception) -> NoReturn:
    """Translate a domain or upstream failure into an HTTPException."""
    if isinstance(error, ProductNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error.message,
        )
    if isinstance(error, DuplicateProductTitleError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=error.message,
        )
    if isinstance(error, DomainValidationError):
        logger.warning("Validation error", error=error.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
    if isinstance(error, DomainError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
    if isinstance(error, httpx.HTTPError):
        logger.error("Catalog backend unavailable", error=str(error))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Catalog backend unavailable",
        )
    raise error


# Handlers
@router.get(
    "/products",
    response_model=PaginatedResponse,
    responses={
        200: {"description": "Page of products"},
        502: {"model": ErrorResponse, "description": "Catalog backend unavailable"},
    },
)
async def list_products(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
    category: Optional[str] = Query(None, description="Filter by category slug"),
    q: Optional[str] = Query(None, description="Free-text search query"),
    container: Container = Depends(get_container),
) -> PaginatedResponse:
    """
    List products with pagination.

    A non-empty search query takes precedence over the category filter.
    """
    logger.info(
        "Listing products",
        page=page,
        limit=limit,
        category=category,
        query=q,
    )

    try:
        result = await container.get_products_use_case().execute(
            page=page,
            limit=limit,
            category=category,
            search_query=q,
        )
    except (DomainError, httpx.HTTPError) as e:
        _raise_http_error(e)

    return PaginatedResponse(
        data=[ProductResponse.from_entity(p) for p in result.products],
        pagination=PaginationInfo(
            page=result.page,
            limit=result.limit,
            total_items=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={
        200: {"description": "Product found"},
        400: {"model": ErrorResponse, "description": "Invalid product ID"},
        404: {"model": ErrorResponse, "description": "Product not found"},
    },
)
async def get_product(
    product_id: int = Path(..., description="Product ID"),
    container: Container = Depends(get_container),
) -> ProductResponse:
    """
    Get a product by ID.

    Args:
        product_id: Product ID.
        container: Injected dependency container.

    Returns:
        Product data.
    """
    logger.info("Getting product", product_id=product_id)

    try:
        product = await container.get_product_use_case().execute(product_id)
    except (DomainError, httpx.HTTPError) as e:
        _raise_http_error(e)

    return ProductResponse.from_entity(product)


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Product created successfully"},
        400: {"model": ErrorResponse, "description": "Validation error"},
        409: {"model": ErrorResponse, "description": "Product title already exists"},
        503: {"model": ErrorResponse, "description": "Service unavailable"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    container: Container = Depends(get_container),
) -> ProductResponse:
    """
    Create a new product.

    Creates a product under a client-generated ID, rejecting duplicate titles.

    Args:
        request: Product creation request.
        container: Injected dependency container.

    Returns:
        Created product.
    """
    logger.info("Creating product", title=request.title)

    try:
        product = await container.create_product_use_case().execute(
            request.to_form_data(),
            client_id=request.client_id,
        )
    except (DomainError, httpx.HTTPError) as e:
        _raise_http_error(e)

    return ProductResponse.from_entity(product)


@router.patch(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={
        200: {"description": "Product updated"},
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Product not found"},
    },
)
async def update_product(
    request: ProductUpdateRequest,
    product_id: int = Path(..., description="Product ID"),
    container: Container = Depends(get_container),
) -> ProductResponse:
    """Apply a partial update to a product."""
    updates = request.to_update()
    logger.info(
        "Updating product",
        product_id=product_id,
        fields=updates.changed_fields(),
    )

    try:
        product = await container.update_product_use_case().execute(product_id, updates)
    except (DomainError, httpx.HTTPError) as e:
        _raise_http_error(e)

    return ProductResponse.from_entity(product)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        204: {"description": "Product deleted"},
        404: {"model": ErrorResponse, "description": "Product not found"},
    },
)
async def delete_product(
    product_id: int = Path(..., description="Product ID"),
    container: Container = Depends(get_container),
) -> Response:
    """Delete a product by ID."""
    logger.info("Deleting product", product_id=product_id)

    try:
        await container.delete_product_use_case().execute(product_id)
    except (DomainError, httpx.HTTPError) as e:
        _raise_http_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    responses={
        200: {"description": "All categories"},
        502: {"model": ErrorResponse, "description": "Catalog backend unavailable"},
    },
)
async def get_categories(
    container: Container = Depends(get_container),
) -> CategoriesResponse:
    """Get all product categories."""
    logger.info("Getting categories")

    try:
        categories = await container.repository.list_categories()
    except httpx.HTTPError as e:
        _raise_http_error(e)

    return CategoriesResponse(data=[CategoryDTO(**c) for c in categories])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy", "service": "product-catalog"}


@router.get("/metrics")
async def metrics():
    """
    Prometheus metrics endpoint.

    Returns:
        Prometheus metrics in text format.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
