"""Constants package for the category admin."""

from .categories import (
    DEFAULT_CATEGORIES,
    get_default_categories,
)
from .colors import (
    BOOTSTRAP_COLORS,
    DEFAULT_CATEGORY_COLOR,
    get_color_choices,
    get_color_hex,
    is_valid_hex_color,
)

__all__ = [
    "BOOTSTRAP_COLORS",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY_COLOR",
    "get_color_choices",
    "get_color_hex",
    "get_default_categories",
    "is_valid_hex_color",
]
