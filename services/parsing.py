"""
Parsing Service

Functions for reading quantity text typed into the scaler form and for
turning scaled numbers back into cooking notation.
"""

import logging
import math
import re

from constants import COMMON_FRACTIONS, FRACTION_TOLERANCE

logger = logging.getLogger(__name__)

# "1 1/2"
MIXED_NUMBER_RE = re.compile(r'^([0-9]+)\s+([0-9]+)/([0-9]+)$')
# "1/2"
FRACTION_RE = re.compile(r'^([0-9]+)/([0-9]+)$')
# Leading float literal, read the way a browser's parseFloat reads it:
# "2 cups" -> 2, "1.5.3" -> 1.5, ".5" -> 0.5
DECIMAL_PREFIX_RE = re.compile(r'^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _divide(num, denom):
    if denom == 0:
        logger.debug("Zero denominator in quantity %s/%s", num, denom)
        return None
    return num / denom


def _finite_or_zero(number):
    # Long digit runs read as inf, and inf/inf as nan
    return number if math.isfinite(number) else 0.0


def parse_quantity(value):
    """
    Parse a quantity string like '1 1/2', '1/4', '2' or '0.5' into a float.

    Never raises: empty, unparseable or non-finite input, and fractions
    with a zero denominator, all read as 0.0.
    """
    if value is None:
        return 0.0

    s = str(value).strip()
    if not s:
        return 0.0

    # Mixed numbers first, then simple fractions, then decimals
    mixed_match = MIXED_NUMBER_RE.match(s)
    if mixed_match:
        whole = float(mixed_match.group(1))
        frac = _divide(float(mixed_match.group(2)), float(mixed_match.group(3)))
        if frac is None:
            return 0.0
        return _finite_or_zero(whole + frac)

    frac_match = FRACTION_RE.match(s)
    if frac_match:
        frac = _divide(float(frac_match.group(1)), float(frac_match.group(2)))
        if frac is None:
            return 0.0
        return _finite_or_zero(frac)

    decimal_match = DECIMAL_PREFIX_RE.match(s)
    if decimal_match:
        # "1e999" overflows to inf
        return _finite_or_zero(float(decimal_match.group(0)))

    return 0.0


def format_amount(value):
    """
    Convert a number to a short display string for a recipe.

    The fractional part snaps to the first entry of COMMON_FRACTIONS within
    FRACTION_TOLERANCE ('1 1/2', '2/3'). Anything else is rounded to two
    places with trailing zeros dropped ('1.05', '3'). Callers must pass a
    finite number.
    """
    if value == 0:
        return '0'

    # Split into whole and decimal parts
    whole = math.floor(value)
    decimal = value - whole

    # First match in table order, not the nearest fraction
    for dec, frac in COMMON_FRACTIONS:
        if abs(decimal - dec) < FRACTION_TOLERANCE:
            if whole == 0:
                return frac
            return f"{whole} {frac}"

    # Round half up, like Math.round. Past ~1.8e306 value * 100 is inf,
    # and such values have no fractional part left to round.
    scaled = value * 100 + 0.5
    rounded = math.floor(scaled) / 100 if math.isfinite(scaled) else value
    return f"{rounded:.2f}".rstrip('0').rstrip('.')
