"""
Ingredient Model

Contains the Ingredient record edited on the scaler form.
"""

from dataclasses import dataclass, asdict

from constants import DEFAULT_UNIT


@dataclass
class Ingredient:
    """
    One row of the scaler form.

    amount is kept exactly as typed ('1 1/2', '0.5') and only parsed when
    scaled amounts are computed. unit is one of constants.UNITS.
    """
    id: str
    name: str = ''
    amount: str = ''
    unit: str = DEFAULT_UNIT

    def to_dict(self):
        return asdict(self)
