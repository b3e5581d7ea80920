"""
Product Catalog Configuration.

Manages settings for the catalog service via environment variables.
"""

import os
from typing import List

from dotenv import load_dotenv


# Values are read once at import time, so .env must be loaded first
load_dotenv()


def _api_base_url() -> str:
    """Resolve the remote API base URL (BFF URL wins over the plain API URL)."""
    return (
        os.getenv("BFF_URL")
        or os.getenv("API_BASE_URL")
        or "https://dummyjson.com"
    )


class Settings:
    """Product catalog settings."""

    # Application settings
    APP_NAME: str = os.getenv("APP_NAME", "product-catalog")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")

    # Remote catalog API
    API_BASE_URL: str = _api_base_url()
    API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "10"))  # seconds

    # Client ID generation range
    CLIENT_ID_MIN: int = int(os.getenv("CLIENT_ID_MIN", "10000"))
    CLIENT_ID_MAX: int = int(os.getenv("CLIENT_ID_MAX", "99999"))

    # Page size used when looking a title up through search
    TITLE_LOOKUP_LIMIT: int = int(os.getenv("TITLE_LOOKUP_LIMIT", "100"))

    # Response cache (empty URL disables caching)
    REDIS_URL: str = os.getenv("REDIS_URL", "")
    CACHE_MAX_JITTER: int = int(os.getenv("CACHE_MAX_JITTER", "30"))  # seconds
    CACHE_TTL_PRODUCTS_LIST: int = int(os.getenv("CACHE_TTL_PRODUCTS_LIST", "300"))
    CACHE_TTL_PRODUCT_DETAIL: int = int(os.getenv("CACHE_TTL_PRODUCT_DETAIL", "600"))
    CACHE_TTL_CATEGORIES: int = int(os.getenv("CACHE_TTL_CATEGORIES", "3600"))
    CACHE_TTL_SEARCH_RESULTS: int = int(os.getenv("CACHE_TTL_SEARCH_RESULTS", "60"))

    # HTTP server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """
        Get list of allowed CORS origins.

        Returns:
            List of origins.
        """
        return [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]

    @classmethod
    def get_cache_ttl(cls, kind: str) -> int:
        """
        Get cache TTL for a kind of API response.

        Args:
            kind: One of "list", "detail", "categories", "search".

        Returns:
            TTL in seconds.
        """
        ttl_map = {
            "list": cls.CACHE_TTL_PRODUCTS_LIST,
            "detail": cls.CACHE_TTL_PRODUCT_DETAIL,
            "categories": cls.CACHE_TTL_CATEGORIES,
            "search": cls.CACHE_TTL_SEARCH_RESULTS,
        }
        return ttl_map.get(kind, cls.CACHE_TTL_PRODUCTS_LIST)


# Global settings instance
settings = Settings()
