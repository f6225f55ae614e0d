"""
Services Package

Quantity parsing, amount formatting and portion scaling.
"""

from .parsing import (
    parse_quantity,
    format_amount,
)

from .scaling import (
    ScaledIngredient,
    ScalingView,
    compute_multiplier,
    is_valid_multiplier,
    is_displayable_amount,
    scale_ingredient,
    build_scaling_view,
)

__all__ = [
    # Parsing
    'parse_quantity',
    'format_amount',
    # Scaling
    'ScaledIngredient',
    'ScalingView',
    'compute_multiplier',
    'is_valid_multiplier',
    'is_displayable_amount',
    'scale_ingredient',
    'build_scaling_view',
]
