"""
Chip colour resolution for descriptors.

Colours come from two tables: an exact, case-sensitive descriptor table
curated in display casing, and a per-category fallback table reached
through classification.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ValidationError

from .classifier import DescriptorClassifier
from .exceptions import CatalogError
from .models import CategoryStyle, ColorStyle, PaletteSwatch
from .taxonomy import DATA_DIR

logger = logging.getLogger("aroma-wheel")

NEUTRAL_CHIP = (
    "bg-stone-100 dark:bg-stone-700 text-charcoal dark:text-stone-100 "
    "border border-stone-200 dark:border-stone-600"
)


class ColorPalette:
    """Read-only colour tables loaded from ``colors.yaml``.

    Attributes:
        descriptors: Exact descriptor -> ColorStyle
        categories: Category name -> ColorStyle
        category_styles: Category name -> CategoryStyle
        swatches: Subcategory name -> PaletteSwatch
    """

    def __init__(
        self,
        descriptors: Mapping[str, ColorStyle],
        categories: Mapping[str, ColorStyle],
        category_styles: Mapping[str, CategoryStyle] | None = None,
        swatches: Mapping[str, PaletteSwatch] | None = None,
    ) -> None:
        self.descriptors = MappingProxyType(dict(descriptors))
        self.categories = MappingProxyType(dict(categories))
        self.category_styles = MappingProxyType(dict(category_styles or {}))
        self.swatches = MappingProxyType(dict(swatches or {}))


def _parse_table(data: dict, key: str, model: type[BaseModel], path: Path | None) -> dict:
    raw = data.get(key) or {}
    if not isinstance(raw, dict):
        raise CatalogError(f"Colour table '{key}' must be a mapping", path=path)
    try:
        return {name: model(**value) for name, value in raw.items()}
    except TypeError as e:
        raise CatalogError(f"Malformed entry in colour table '{key}': {e}", path=path) from e
    except ValidationError as e:
        raise CatalogError(
            f"Invalid entry in colour table '{key}': {e.error_count()} validation error(s)",
            path=path,
            details={"errors": e.errors()},
        ) from e


def parse_palette(data: Any, path: Path | None = None) -> ColorPalette:
    """Build a palette from already-parsed colour data.

    Raises:
        CatalogError: If 'descriptors' or 'categories' is missing, or an
            entry fails validation
    """
    if not isinstance(data, dict) or "descriptors" not in data or "categories" not in data:
        raise CatalogError("Colour file must contain 'descriptors' and 'categories' keys", path=path)

    palette = ColorPalette(
        descriptors=_parse_table(data, "descriptors", ColorStyle, path),
        categories=_parse_table(data, "categories", ColorStyle, path),
        category_styles=_parse_table(data, "category_styles", CategoryStyle, path),
        swatches=_parse_table(data, "swatches", PaletteSwatch, path),
    )
    logger.debug(
        f"Loaded palette with {len(palette.descriptors)} descriptor colours, "
        f"{len(palette.categories)} category colours"
    )
    return palette


def load_palette(path: Path) -> ColorPalette:
    """Load colour tables from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        CatalogError: If the structure is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_palette(data, path=Path(path))


def load_builtin_palette() -> ColorPalette:
    """Load the colour tables shipped with the package."""
    return load_palette(DATA_DIR / "colors.yaml")


class ColorResolver:
    """Maps descriptors to chip colours.

    Resolution order:
        1. exact, case-sensitive match in the descriptor table
        2. the colour of the descriptor's category (case-insensitive
           classification)
        3. None, and the caller renders a neutral chip

    Example:
        >>> resolver = ColorResolver(classifier, load_builtin_palette())
        >>> resolver.color_of("Truffle").background  # no exact entry
        'bg-grape/15'
        >>> resolver.color_of("CustomUserTerm123") is None
        True
    """

    def __init__(self, classifier: DescriptorClassifier, palette: ColorPalette) -> None:
        self.classifier = classifier
        self.palette = palette

    def color_of(self, descriptor: str) -> ColorStyle | None:
        """Return the chip colour for a descriptor, or None if it is unclassified."""
        exact = self.palette.descriptors.get(descriptor)
        if exact is not None:
            return exact

        category = self.classifier.category_of(descriptor)
        if category is not None:
            return self.palette.categories.get(category)
        return None

    def css_classes(self, descriptor: str, default: str = NEUTRAL_CHIP) -> str:
        """Return the chip class string, or ``default`` for unstyled descriptors."""
        style = self.color_of(descriptor)
        return style.css_classes() if style is not None else default

    def category_style(self, category_name: str) -> CategoryStyle | None:
        """Return the palette accent and badge for a category."""
        return self.palette.category_styles.get(category_name)

    def swatch_for(self, subcategory_name: str) -> PaletteSwatch | None:
        """Return the palette swatch for a subcategory."""
        return self.palette.swatches.get(subcategory_name)


__all__ = [
    "ColorPalette",
    "ColorResolver",
    "NEUTRAL_CHIP",
    "load_builtin_palette",
    "load_palette",
    "parse_palette",
]
