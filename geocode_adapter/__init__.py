"""
Google geocoding response adapter.

Turns a Google Geocoding API payload into a normalized Location with a
precision classification, or a typed geocoding error.
"""

__version__ = "0.1.0"
