# Utility modules for the Ingredient Upscaler
from .sanitizer import (
    sanitize_text, sanitize_ingredient_name, sanitize_amount, sanitize_portions
)
