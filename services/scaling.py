"""
Scaling Service

Computes the portion multiplier and the scaled amount of each ingredient.
Results that cannot be shown (division by zero, empty amounts) come back
with a display of None; the caller decides what placeholder to render.
"""

import math
from dataclasses import dataclass
from typing import Optional

from models import Ingredient
from .parsing import parse_quantity, format_amount


@dataclass
class ScaledIngredient:
    """An ingredient row together with its scaled amount."""
    ingredient: Ingredient
    original_amount: float
    scaled_amount: float
    scaled_display: Optional[str] = None

    @property
    def displayable(self):
        return self.scaled_display is not None


@dataclass
class ScalingView:
    """Everything the form needs to render one pass."""
    multiplier: float
    multiplier_display: Optional[str]
    rows: list

    @property
    def multiplier_valid(self):
        return self.multiplier_display is not None


def _ieee_divide(num, denom):
    """Float division that returns inf/nan on a zero denominator instead of raising."""
    if denom == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / denom


def compute_multiplier(original_text, desired_text):
    """Return desired / original portions. Never raises."""
    return _ieee_divide(parse_quantity(desired_text), parse_quantity(original_text))


def is_valid_multiplier(value):
    return math.isfinite(value) and value > 0


def is_displayable_amount(original_amount, scaled_amount):
    return original_amount > 0 and math.isfinite(scaled_amount)


def scale_ingredient(ingredient, multiplier):
    """Scale one ingredient's amount text by multiplier."""
    original_amount = parse_quantity(ingredient.amount)
    scaled_amount = original_amount * multiplier

    scaled_display = None
    if is_valid_multiplier(multiplier) and is_displayable_amount(original_amount, scaled_amount):
        scaled_display = format_amount(scaled_amount)

    return ScaledIngredient(
        ingredient=ingredient,
        original_amount=original_amount,
        scaled_amount=scaled_amount,
        scaled_display=scaled_display,
    )


def build_scaling_view(original_text, desired_text, ingredients):
    """Compute the multiplier and every scaled row for one render."""
    multiplier = compute_multiplier(original_text, desired_text)
    multiplier_display = format_amount(multiplier) if is_valid_multiplier(multiplier) else None

    return ScalingView(
        multiplier=multiplier,
        multiplier_display=multiplier_display,
        rows=[scale_ingredient(ing, multiplier) for ing in ingredients],
    )
