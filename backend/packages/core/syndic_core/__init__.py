"""
Syndic Core Package.

This package contains the shared settings, logging setup, error types
and feed data schemas used by the Syndic renderers.
"""

__version__ = "0.1.0"

from .logging_config import get_logger, init_logging

__all__ = ["init_logging", "get_logger"]
