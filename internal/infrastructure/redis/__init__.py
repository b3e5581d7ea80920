"""
Redis infrastructure package.
"""
from .cache import ApiResponseCache, RedisCache

__all__ = ["ApiResponseCache", "RedisCache"]
