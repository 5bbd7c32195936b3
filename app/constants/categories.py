"""Default categories seeded into a fresh installation.

The default categories created by the ``flask categories seed`` command.
"""

from typing import List, TypedDict

from .colors import get_color_hex


class CategoryData(TypedDict):
    """Type definition for category data."""

    name: str
    description: str
    color: str
    icon: str


DEFAULT_CATEGORIES: List[CategoryData] = [
    {
        "name": "Electronics",
        "description": "Phones, computers and accessories",
        "color": get_color_hex("blue"),
        "icon": "laptop",
    },
    {
        "name": "Books",
        "description": "Printed books and e-books",
        "color": get_color_hex("orange"),
        "icon": "book",
    },
    {
        "name": "Clothing",
        "description": "Apparel, shoes and accessories",
        "color": get_color_hex("purple"),
        "icon": "tshirt",
    },
    {
        "name": "Home & Garden",
        "description": "Furniture, decor and garden supplies",
        "color": get_color_hex("green"),
        "icon": "home",
    },
    {
        "name": "Other",
        "description": "Everything else",
        "color": get_color_hex("gray"),
        "icon": "question",
    },
]


def get_default_categories() -> List[CategoryData]:
    """Get the default categories.

    Returns:
        List of default category data dictionaries
    """
    return [category.copy() for category in DEFAULT_CATEGORIES]  # type: ignore[misc]
