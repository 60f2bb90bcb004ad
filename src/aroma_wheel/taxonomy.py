"""
Descriptor taxonomy store and YAML catalog loader.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml
from pydantic import ValidationError

from .config import CatalogVariant
from .exceptions import CatalogError
from .models import Category, Subcategory

logger = logging.getLogger("aroma-wheel")

DATA_DIR = Path(__file__).parent / "data"
FAULTS_CATEGORY = "Faults / Off-Aromas"


class Taxonomy:
    """An immutable, ordered catalog of categories, subcategories and descriptors.

    Category order is display order and also the tie-break order for
    classification: a descriptor listed in several categories belongs to the
    one declared first.

    Example:
        >>> taxonomy = load_builtin_catalog(CatalogVariant.AROMA_WHEEL)
        >>> [c.name for c in taxonomy.all_categories()][:2]
        ['Primary (Grape-Derived)', 'Secondary (Winemaking)']
    """

    def __init__(self, categories: Iterable[Category], name: str = "custom") -> None:
        """Build a taxonomy from categories in display order.

        Raises:
            CatalogError: If two categories share a name, or a category
                contains two subcategories with the same name
        """
        self.name = name
        self._categories: tuple[Category, ...] = tuple(categories)
        self._by_name: dict[str, Category] = {}

        for category in self._categories:
            if category.name in self._by_name:
                raise CatalogError(
                    f"Duplicate category name '{category.name}' in catalog '{name}'"
                )
            seen_subs: set[str] = set()
            for sub in category.subcategories:
                if sub.name in seen_subs:
                    raise CatalogError(
                        f"Duplicate subcategory '{sub.name}' in category '{category.name}'"
                    )
                seen_subs.add(sub.name)
            self._by_name[category.name] = category

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"Taxonomy(name={self.name!r}, categories={len(self._categories)})"

    def all_categories(self) -> tuple[Category, ...]:
        """Return every category in declared order."""
        return self._categories

    def category(self, name: str) -> Category | None:
        """Return the category with exactly this name, or None."""
        return self._by_name.get(name)

    def descriptor_count(self, category_name: str | None = None) -> int:
        """Count descriptor occurrences, overall or within one category.

        Descriptors listed under several subcategories are counted once per
        listing. An unknown category name counts as zero.
        """
        if category_name is None:
            categories: Iterable[Category] = self._categories
        else:
            found = self._by_name.get(category_name)
            categories = (found,) if found is not None else ()
        return sum(len(sub.descriptors) for c in categories for sub in c.subcategories)

    def without_category(self, name: str) -> "Taxonomy":
        """Return a copy of this taxonomy with one category left out."""
        return Taxonomy((c for c in self._categories if c.name != name), name=self.name)

    def shared_descriptors(self) -> dict[str, list[str]]:
        """Map descriptors listed in more than one category to those categories.

        Keys are lower-cased; category names are in declared order.
        """
        owners: dict[str, list[str]] = defaultdict(list)
        for category in self._categories:
            for _, descriptor in category.iter_descriptors():
                key = descriptor.lower()
                if category.name not in owners[key]:
                    owners[key].append(category.name)
        return {key: names for key, names in owners.items() if len(names) > 1}


def _list_field(entry: Any, key: str, path: Path | None) -> list:
    """Return ``entry[key]`` as a list; a missing or null value is empty."""
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogError(
            f"Catalog '{key}' of '{entry.get('name')}' must be a list, got {type(value).__name__}",
            path=path,
        )
    return value


def parse_catalog(data: Any, name: str = "custom", path: Path | None = None) -> Taxonomy:
    """Build a taxonomy from already-parsed catalog data.

    Expected format:
        categories:
          - name: Primary (Grape-Derived)
            subcategories:
              - name: Black Fruit
                descriptors: [Blackcurrant, Blackberry]

    Raises:
        CatalogError: If the data is not a mapping with a 'categories' list,
            or any entry fails validation
    """
    if not isinstance(data, dict) or "categories" not in data:
        raise CatalogError("Catalog must contain a 'categories' key", path=path)
    if not isinstance(data["categories"], list):
        raise CatalogError("Catalog 'categories' must be a list", path=path)

    try:
        categories = []
        for raw in data["categories"]:
            subcategories = []
            for sub in _list_field(raw, "subcategories", path):
                descriptors = _list_field(sub, "descriptors", path)
                subcategories.append(Subcategory(name=sub["name"], descriptors=tuple(descriptors)))
            categories.append(Category(name=raw["name"], subcategories=tuple(subcategories)))
    except (KeyError, TypeError, AttributeError) as e:
        raise CatalogError(f"Malformed catalog entry: {e}", path=path) from e
    except ValidationError as e:
        raise CatalogError(
            f"Invalid catalog entry: {e.error_count()} validation error(s)",
            path=path,
            details={"errors": e.errors()},
        ) from e

    try:
        taxonomy = Taxonomy(categories, name=data.get("name", name))
    except CatalogError as e:
        e.path = path
        raise

    shared = taxonomy.shared_descriptors()
    logger.debug(
        f"Loaded catalog '{taxonomy.name}' with {len(taxonomy)} categories, "
        f"{taxonomy.descriptor_count()} descriptors"
    )
    if shared:
        logger.debug(
            f"Catalog '{taxonomy.name}': {len(shared)} descriptors appear in more than "
            f"one category; the first declared category wins"
        )
    return taxonomy


def load_catalog(path: Path) -> Taxonomy:
    """Load a taxonomy from a YAML catalog file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        CatalogError: If the catalog structure is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_catalog(data, name=Path(path).stem, path=Path(path))


def load_builtin_catalog(
    variant: CatalogVariant | str = CatalogVariant.AROMA_WHEEL,
    include_faults: bool = True,
) -> Taxonomy:
    """Load one of the catalogs shipped with the package.

    Args:
        variant: Which catalog to load, as the enum or its value in any case
        include_faults: When False, drop the Faults / Off-Aromas category
    """
    if isinstance(variant, str) and not isinstance(variant, CatalogVariant):
        variant = variant.strip().lower()
    taxonomy = load_catalog(DATA_DIR / f"{CatalogVariant(variant).value}.yaml")
    if not include_faults and taxonomy.category(FAULTS_CATEGORY) is not None:
        taxonomy = taxonomy.without_category(FAULTS_CATEGORY)
    return taxonomy


__all__ = [
    "DATA_DIR",
    "FAULTS_CATEGORY",
    "Taxonomy",
    "load_builtin_catalog",
    "load_catalog",
    "parse_catalog",
]
