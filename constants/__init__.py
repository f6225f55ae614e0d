"""
Constants Package

Units, fraction tables and validation whitelists.
"""

from .units import (
    UNITS, DEFAULT_UNIT, DEFAULT_ORIGINAL_PORTIONS, DEFAULT_DESIRED_PORTIONS,
    COMMON_FRACTIONS, FRACTION_TOLERANCE,
)
from .validation import VALID_UNITS, EDITABLE_FIELDS, MAX_LENGTHS

__all__ = [
    'UNITS',
    'DEFAULT_UNIT',
    'DEFAULT_ORIGINAL_PORTIONS',
    'DEFAULT_DESIRED_PORTIONS',
    'COMMON_FRACTIONS',
    'FRACTION_TOLERANCE',
    'VALID_UNITS',
    'EDITABLE_FIELDS',
    'MAX_LENGTHS',
]
