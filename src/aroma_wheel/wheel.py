"""
AromaWheel facade and the process-wide default instance.
"""

import logging
from functools import lru_cache
from typing import Collection, Iterable

from .classifier import DescriptorClassifier
from .colors import NEUTRAL_CHIP, ColorPalette, ColorResolver, load_builtin_palette
from .config import AromaWheelConfig
from .models import Category, CategoryStyle, Classification, ColorStyle, PaletteSwatch, SearchHit
from .search import SearchIndex
from .taxonomy import Taxonomy, load_builtin_catalog

logger = logging.getLogger("aroma-wheel")


class AromaWheel:
    """One taxonomy wired to its classifier, colour resolver and search index.

    The taxonomy and palette are injected, so tests and alternate catalogs
    can build their own wheel; most callers use :func:`get_default_wheel`.
    """

    def __init__(
        self,
        taxonomy: Taxonomy,
        palette: ColorPalette,
        config: AromaWheelConfig | None = None,
    ) -> None:
        self.config = config or AromaWheelConfig()
        self.taxonomy = taxonomy
        self.palette = palette
        self.classifier = DescriptorClassifier(taxonomy, separator=self.config.label_separator)
        self.colors = ColorResolver(self.classifier, palette)
        self.index = SearchIndex(
            taxonomy,
            limit=self.config.search_limit,
            palette_limit=self.config.palette_limit,
        )

    @classmethod
    def from_config(cls, config: AromaWheelConfig | None = None) -> "AromaWheel":
        """Build a wheel from the built-in catalog and colour tables."""
        config = config or AromaWheelConfig()
        taxonomy = load_builtin_catalog(config.catalog, include_faults=config.include_faults)
        wheel = cls(taxonomy, load_builtin_palette(), config)
        logger.info(
            f"Aroma wheel ready: catalog '{taxonomy.name}', "
            f"{len(wheel.index.descriptors)} distinct descriptors"
        )
        return wheel

    # Taxonomy

    def all_categories(self) -> tuple[Category, ...]:
        return self.taxonomy.all_categories()

    def descriptor_count(self, category_name: str | None = None) -> int:
        return self.taxonomy.descriptor_count(category_name)

    # Classification

    def classify(self, descriptor: str) -> Classification | None:
        return self.classifier.classify(descriptor)

    def category_of(self, descriptor: str) -> str | None:
        return self.classifier.category_of(descriptor)

    def category_and_subcategory_of(self, descriptor: str) -> str | None:
        return self.classifier.category_and_subcategory_of(descriptor)

    def all_classifications(self, descriptor: str) -> list[Classification]:
        return self.classifier.all_classifications(descriptor)

    def category_breakdown(self, descriptors: Iterable[str]) -> dict[str, int]:
        return self.classifier.category_breakdown(descriptors)

    # Colours

    def color_of(self, descriptor: str) -> ColorStyle | None:
        return self.colors.color_of(descriptor)

    def css_classes(self, descriptor: str, default: str = NEUTRAL_CHIP) -> str:
        return self.colors.css_classes(descriptor, default)

    def category_style(self, category_name: str) -> CategoryStyle | None:
        return self.colors.category_style(category_name)

    def swatch_for(self, subcategory_name: str) -> PaletteSwatch | None:
        return self.colors.swatch_for(subcategory_name)

    # Search

    @property
    def descriptors(self) -> tuple[str, ...]:
        return self.index.descriptors

    def search(self, query: str) -> list[str]:
        return self.index.search(query)

    def search_excluding(self, query: str, already_chosen: Collection[str]) -> list[str]:
        return self.index.search_excluding(query, already_chosen)

    def search_with_context(self, query: str) -> list[SearchHit]:
        return self.index.search_with_context(query)

    def filter_categories(self, query: str) -> tuple[Category, ...]:
        return self.index.filter_categories(query)


@lru_cache(maxsize=1)
def get_default_wheel() -> AromaWheel:
    """Return the shared wheel built from the default configuration.

    Built on first call and reused for the life of the process.
    """
    return AromaWheel.from_config(AromaWheelConfig())


def all_categories() -> tuple[Category, ...]:
    """Every category of the default catalog, in display order."""
    return get_default_wheel().all_categories()


def category_of(descriptor: str) -> str | None:
    """Category name for a descriptor in the default catalog, or None."""
    return get_default_wheel().category_of(descriptor)


def category_and_subcategory_of(descriptor: str) -> str | None:
    """``"Category › Subcategory"`` label for a descriptor, or None."""
    return get_default_wheel().category_and_subcategory_of(descriptor)


def color_of(descriptor: str) -> ColorStyle | None:
    """Chip colour for a descriptor, or None when it has no classification."""
    return get_default_wheel().color_of(descriptor)


def search(query: str) -> list[str]:
    """Autocomplete over the default catalog, at most ten results."""
    return get_default_wheel().search(query)


def search_excluding(query: str, already_chosen: Collection[str]) -> list[str]:
    """Autocomplete leaving out descriptors already chosen."""
    return get_default_wheel().search_excluding(query, already_chosen)


__all__ = [
    "AromaWheel",
    "all_categories",
    "category_and_subcategory_of",
    "category_of",
    "color_of",
    "get_default_wheel",
    "search",
    "search_excluding",
]
