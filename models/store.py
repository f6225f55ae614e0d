"""
Ingredient Store

In-memory state behind the scaler form: the ingredient rows and the two
portion counts. Every mutation goes through one method per field and is
announced to subscribed listeners.
"""

import logging
import uuid

from constants import (
    EDITABLE_FIELDS, VALID_UNITS, DEFAULT_ORIGINAL_PORTIONS, DEFAULT_DESIRED_PORTIONS,
)
from .ingredient import Ingredient

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for rejected store updates."""
    pass


class IngredientNotFoundError(StoreError):
    """Raised when no ingredient has the given id."""
    pass


class InvalidFieldError(StoreError):
    """Raised when updating a field that is not editable."""
    pass


class InvalidUnitError(StoreError):
    """Raised when a unit is not in the allowed list."""
    pass


def _new_id():
    return str(uuid.uuid4())


class IngredientStore:
    """
    Mutable list of ingredient rows plus the original/desired portion text.

    The store always holds at least one row. Listeners registered with
    subscribe() are called as listener(store, change) after each mutation.
    """

    def __init__(self, original_portions=DEFAULT_ORIGINAL_PORTIONS,
                 desired_portions=DEFAULT_DESIRED_PORTIONS, id_factory=None):
        self._id_factory = id_factory or _new_id
        self._listeners = []
        self._original_portions = original_portions
        self._desired_portions = desired_portions
        self._ingredients = []
        self._ingredients.append(self._new_ingredient())

    # ----------------------------------------
    # Read access
    # ----------------------------------------

    @property
    def ingredients(self):
        return tuple(self._ingredients)

    @property
    def original_portions(self):
        return self._original_portions

    @property
    def desired_portions(self):
        return self._desired_portions

    def get_ingredient(self, ingredient_id):
        for ingredient in self._ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        raise IngredientNotFoundError(f"No ingredient with id {ingredient_id!r}")

    def to_dict(self):
        return {
            'original_portions': self._original_portions,
            'desired_portions': self._desired_portions,
            'ingredients': [i.to_dict() for i in self._ingredients],
        }

    # ----------------------------------------
    # Listeners
    # ----------------------------------------

    def subscribe(self, listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change):
        for listener in list(self._listeners):
            listener(self, change)

    # ----------------------------------------
    # Mutations
    # ----------------------------------------

    def _new_ingredient(self):
        ingredient_id = self._id_factory()
        # Ids must stay unique for the life of the list
        while any(i.id == ingredient_id for i in self._ingredients):
            ingredient_id = self._id_factory()
        return Ingredient(id=ingredient_id)

    def add_ingredient(self):
        """Append an empty row and return it."""
        ingredient = self._new_ingredient()
        self._ingredients.append(ingredient)
        self._notify(f"added ingredient {ingredient.id}")
        return ingredient

    def remove_ingredient(self, ingredient_id):
        """
        Remove a row. Removing the last remaining row is a no-op.

        Returns True if the row was removed.
        """
        ingredient = self.get_ingredient(ingredient_id)
        if len(self._ingredients) <= 1:
            logger.debug("Refusing to remove last ingredient %s", ingredient_id)
            return False
        self._ingredients.remove(ingredient)
        self._notify(f"removed ingredient {ingredient_id}")
        return True

    def update_ingredient(self, ingredient_id, field, value):
        """Set one field (name, amount or unit) of a row."""
        if field not in EDITABLE_FIELDS:
            raise InvalidFieldError(f"Field {field!r} cannot be edited")
        if field == 'unit' and value not in VALID_UNITS:
            raise InvalidUnitError(f"Unknown unit {value!r}")

        ingredient = self.get_ingredient(ingredient_id)
        setattr(ingredient, field, value)
        self._notify(f"updated {field} of ingredient {ingredient_id}")
        return ingredient

    def set_original_portions(self, text):
        self._original_portions = text
        self._notify("updated original portions")

    def set_desired_portions(self, text):
        self._desired_portions = text
        self._notify("updated desired portions")
