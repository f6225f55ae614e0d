"""
Models Package

Exports the ingredient record and the in-memory store behind the form.
"""

from .ingredient import Ingredient
from .store import (
    IngredientStore,
    StoreError,
    IngredientNotFoundError,
    InvalidFieldError,
    InvalidUnitError,
)

__all__ = [
    'Ingredient',
    'IngredientStore',
    'StoreError',
    'IngredientNotFoundError',
    'InvalidFieldError',
    'InvalidUnitError',
]
