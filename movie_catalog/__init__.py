"""
Movie Catalog API Package.

This package contains the catalog core (schema validation, record store,
request handlers), the FastAPI layer, and shared utilities.
"""

__version__ = "1.0.0"
