"""
FastAPI Application Entry Point.

REST API server for the Product Catalog.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from config.settings import settings
from internal.infrastructure.catalog_api import ProductsApiClient
from internal.infrastructure.container import Container
from internal.infrastructure.redis import ApiResponseCache, RedisCache
from internal.transport.http.middleware import MetricsMiddleware, RequestContextMiddleware
from internal.transport.http.v1.handlers import router, set_dependencies
from pkg.logger.logger import setup_logging, get_logger


# Setup logging
setup_logging(
    level=settings.LOG_LEVEL,
    json_format=settings.LOG_FORMAT == "json",
)

logger = get_logger(__name__)


async def _connect_cache() -> Optional[RedisCache]:
    """Connect the response cache, or return None to run uncached."""
    if not settings.REDIS_URL:
        logger.info("REDIS_URL not set, response caching disabled")
        return None

    redis_cache = RedisCache(redis_url=settings.REDIS_URL)
    try:
        await redis_cache.connect()
    except (RedisError, OSError) as e:
        logger.warning("Failed to connect to Redis, caching disabled", error=str(e))
        return None
    return redis_cache


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    logger.info("Starting Product Catalog API...", api_base_url=settings.API_BASE_URL)

    redis_cache = await _connect_cache()
    api_client = ProductsApiClient(
        base_url=settings.API_BASE_URL,
        timeout=settings.API_TIMEOUT,
        cache=ApiResponseCache(redis_cache) if redis_cache else None,
    )

    set_dependencies(Container(api_client=api_client))
    logger.info("Product Catalog API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Product Catalog API...")
    set_dependencies(None)
    await api_client.close()

    if redis_cache:
        await redis_cache.disconnect()

    logger.info("Product Catalog API shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Product Catalog API",
    description="Product catalog backed by a remote products API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Metrics middleware
app.add_middleware(MetricsMiddleware)

# Request ID middleware
app.add_middleware(RequestContextMiddleware)


# Include routers
app.include_router(router)


# Root endpoint
@app.get("/")
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "status": "running",
    }


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
    )
