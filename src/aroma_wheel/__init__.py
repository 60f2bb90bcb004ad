"""
Wine aroma and flavour descriptor taxonomy.

Classifies free-text tasting descriptors into primary, secondary, tertiary
and fault categories, resolves chip colours for them, and provides
substring autocomplete over the curated vocabulary.
"""

from .classifier import UNCLASSIFIED, DescriptorClassifier
from .colors import NEUTRAL_CHIP, ColorPalette, ColorResolver, load_builtin_palette, load_palette
from .config import AromaWheelConfig, CatalogVariant
from .exceptions import AromaWheelError, CatalogError
from .models import (
    LABEL_SEPARATOR,
    Category,
    CategoryStyle,
    Classification,
    ColorStyle,
    PaletteSwatch,
    SearchHit,
    Subcategory,
)
from .search import SearchIndex
from .selection import add_descriptor, remove_descriptor, suggest, toggle_descriptor
from .taxonomy import FAULTS_CATEGORY, Taxonomy, load_builtin_catalog, load_catalog
from .wheel import (
    AromaWheel,
    all_categories,
    category_and_subcategory_of,
    category_of,
    color_of,
    get_default_wheel,
    search,
    search_excluding,
)

__all__ = [
    "AromaWheel",
    "AromaWheelConfig",
    "AromaWheelError",
    "CatalogError",
    "CatalogVariant",
    "Category",
    "CategoryStyle",
    "Classification",
    "ColorPalette",
    "ColorResolver",
    "ColorStyle",
    "DescriptorClassifier",
    "FAULTS_CATEGORY",
    "LABEL_SEPARATOR",
    "NEUTRAL_CHIP",
    "PaletteSwatch",
    "SearchHit",
    "SearchIndex",
    "Subcategory",
    "Taxonomy",
    "UNCLASSIFIED",
    "add_descriptor",
    "all_categories",
    "category_and_subcategory_of",
    "category_of",
    "color_of",
    "get_default_wheel",
    "load_builtin_catalog",
    "load_builtin_palette",
    "load_catalog",
    "load_palette",
    "remove_descriptor",
    "search",
    "search_excluding",
    "suggest",
    "toggle_descriptor",
]
