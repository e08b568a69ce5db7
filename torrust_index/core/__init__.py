"""
Core utilities and configuration for the Torrust Index data-access layer.

This package provides configuration, logging setup, the error taxonomy and the
database layer itself.
"""

from torrust_index.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
