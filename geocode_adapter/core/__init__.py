"""
Core module providing shared configuration.

Usage:
    from geocode_adapter.core import settings
"""

from geocode_adapter.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
