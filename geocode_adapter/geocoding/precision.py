"""
Precision scale for geocoded locations.
"""

from enum import IntEnum


class Precision(IntEnum):
    """
    How specific a geocoded location is, ordered coarsest to finest.

    UNKNOWN is the bottom of the scale, so it only wins when nothing
    else applies.
    """

    UNKNOWN = 0
    COUNTRY = 1
    REGION = 2
    LOCALITY = 3
    POSTAL_CODE = 4
    STREET = 5
    ADDRESS = 6
    PREMISE = 7

    @property
    def label(self) -> str:
        """Lowercase name, e.g. "postal_code"."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.label
