"""
Input Sanitization Module

Cleans text submitted from the scaler form before it reaches the store.
HTML escaping is left to Jinja autoescaping at render time, so values are
stored as typed, minus control characters.
"""

import re

from constants import MAX_LENGTHS

CONTROL_CHARS_RE = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=500):
    """
    Sanitize a single-line form value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 500)

    Returns:
        Stripped string without control characters, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Strip whitespace, then drop control characters and null bytes
    text = text.strip()
    text = CONTROL_CHARS_RE.sub('', text)

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_ingredient_name(name):
    """Sanitize an ingredient name, collapsing runs of whitespace."""
    name = sanitize_text(name, MAX_LENGTHS['ingredient_name'])
    return re.sub(r'\s+', ' ', name)


def sanitize_amount(amount):
    """Sanitize an amount such as '1 1/2'. The text is not parsed here."""
    return sanitize_text(amount, MAX_LENGTHS['amount'])


def sanitize_portions(portions):
    """Sanitize a portion count typed into 'Recipe makes' or 'I want to make'."""
    return sanitize_text(portions, MAX_LENGTHS['portions'])
