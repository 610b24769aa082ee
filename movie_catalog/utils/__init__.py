"""
Shared utilities package.

This package contains logging configuration shared across the
application.
"""

from movie_catalog.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
