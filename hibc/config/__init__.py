"""
Configuration management for HIBC check digit validation.
"""

from hibc.config.logging import configure_logging
from hibc.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
