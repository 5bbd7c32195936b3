"""Colour palette offered for categories in the admin panel."""

import re
from typing import TypedDict


class ColorData(TypedDict):
    """Type definition for color data."""

    hex: str
    name: str


# Bootstrap 5 compatible color palette
BOOTSTRAP_COLORS: dict[str, ColorData] = {
    "gray": {"hex": "#6c757d", "name": "Gray"},
    "blue": {"hex": "#0d6efd", "name": "Blue"},
    "indigo": {"hex": "#6610f2", "name": "Indigo"},
    "purple": {"hex": "#6f42c1", "name": "Purple"},
    "red": {"hex": "#dc3545", "name": "Red"},
    "orange": {"hex": "#fd7e14", "name": "Orange"},
    "yellow": {"hex": "#ffc107", "name": "Yellow"},
    "green": {"hex": "#198754", "name": "Green"},
    "teal": {"hex": "#20c997", "name": "Teal"},
    "cyan": {"hex": "#0dcaf0", "name": "Cyan"},
}

DEFAULT_CATEGORY_COLOR = BOOTSTRAP_COLORS["gray"]["hex"]

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def get_color_hex(name: str) -> str:
    """Get the hex value for a palette colour name, falling back to gray."""
    color = BOOTSTRAP_COLORS.get(name.lower())
    return color["hex"] if color else DEFAULT_CATEGORY_COLOR


def get_color_choices() -> list[tuple[str, str]]:
    """Return (hex, label) pairs for a select field."""
    return [(color["hex"], color["name"]) for color in BOOTSTRAP_COLORS.values()]


def is_valid_hex_color(value: str | None) -> bool:
    """Check for a #rgb or #rrggbb colour string."""
    return bool(value) and bool(_HEX_COLOR_RE.match(value))  # type: ignore[arg-type]
