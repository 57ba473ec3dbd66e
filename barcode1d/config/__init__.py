"""
Configuration management for barcode1d.
"""

from barcode1d.config.logging_setup import configure_logging
from barcode1d.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
