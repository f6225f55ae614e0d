"""
Unit Constants and Fraction Tables

Contains the measurement units offered on the scaler form and the
culinary fraction table used to display scaled amounts.
"""

# Units offered for each ingredient row (value -> label), in display order
UNITS = {
    'tsp': 'tsp',
    'tbsp': 'tbsp',
    'cup': 'cup',
    'g': 'g',
    'oz': 'oz',
    'pinch': 'pinch',
    'dash': 'dash',
}

DEFAULT_UNIT = 'tsp'

# Portion counts a fresh form starts with
DEFAULT_ORIGINAL_PORTIONS = '1'
DEFAULT_DESIRED_PORTIONS = '2'

# Common fractions for display. Order matters: the first entry within
# FRACTION_TOLERANCE wins, even if a later entry is closer.
COMMON_FRACTIONS = (
    (0.125, '1/8'),
    (0.25, '1/4'),
    (0.333, '1/3'),
    (0.375, '3/8'),
    (0.5, '1/2'),
    (0.625, '5/8'),
    (0.666, '2/3'),
    (0.75, '3/4'),
    (0.875, '7/8'),
)

FRACTION_TOLERANCE = 0.05
