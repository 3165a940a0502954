"""
Utility modules for the underwriting service.
"""

from .config import Config
from .log import configure_logging

__all__ = ["Config", "configure_logging"]
