"""
Logger package.
"""
from .logger import (
    setup_logging,
    get_logger,
    set_request_id,
    get_request_id,
    bind_context,
    clear_context,
    StructuredLogger,
    StructuredFormatter,
    TextFormatter,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "set_request_id",
    "get_request_id",
    "bind_context",
    "clear_context",
    "StructuredLogger",
    "StructuredFormatter",
    "TextFormatter",
]
