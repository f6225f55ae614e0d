"""
Validation Constants

Contains whitelist values and length limits for user input on the
scaler form.
"""

from .units import UNITS

# Valid values for an ingredient's unit field (whitelist)
VALID_UNITS = frozenset(UNITS)

# Ingredient fields that can be edited from the form
EDITABLE_FIELDS = ('name', 'amount', 'unit')

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'amount': 50,
    'portions': 50,
}
