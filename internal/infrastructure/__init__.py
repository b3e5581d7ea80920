"""
Infrastructure package for the Product Catalog.

Remote API access, response caching, metrics and dependency wiring.
"""
