"""
Descriptor classification: resolve a descriptor string to its category.
"""

from typing import Iterable

from .models import LABEL_SEPARATOR, Classification
from .taxonomy import Taxonomy

UNCLASSIFIED = "Other"


class DescriptorClassifier:
    """Resolves descriptors to their owning category and subcategory.

    Matching is case-insensitive equality against every descriptor, scanning
    categories in declared order and subcategories within each category in
    declared order. The first match wins, so a descriptor listed under both
    Secondary and Tertiary is classified as Secondary.

    Unknown descriptors are an expected input (free text typed by a taster)
    and resolve to None rather than raising.

    Example:
        >>> classifier = DescriptorClassifier(taxonomy)
        >>> classifier.category_of("blackcurrant")
        'Primary (Grape-Derived)'
        >>> classifier.category_and_subcategory_of("Blackcurrant")
        'Primary (Grape-Derived) › Black Fruit'
        >>> classifier.category_of("CustomUserTerm123") is None
        True
    """

    def __init__(self, taxonomy: Taxonomy, separator: str = LABEL_SEPARATOR) -> None:
        self.taxonomy = taxonomy
        self.separator = separator
        # lower-cased descriptor -> every occurrence in traversal order
        self._occurrences: dict[str, list[Classification]] = {}
        for category in taxonomy.all_categories():
            for sub, descriptor in category.iter_descriptors():
                self._occurrences.setdefault(descriptor.lower(), []).append(
                    Classification(category=category.name, subcategory=sub.name)
                )

    def classify(self, descriptor: str) -> Classification | None:
        """Return the first category/subcategory listing the descriptor, or None."""
        occurrences = self._occurrences.get(descriptor.lower())
        if not occurrences:
            return None
        return occurrences[0]

    def category_of(self, descriptor: str) -> str | None:
        """Return the name of the first category listing the descriptor, or None."""
        found = self.classify(descriptor)
        return found.category if found is not None else None

    def category_and_subcategory_of(self, descriptor: str) -> str | None:
        """Return a ``"Category › Subcategory"`` label for the descriptor, or None."""
        found = self.classify(descriptor)
        return found.label(self.separator) if found is not None else None

    def all_classifications(self, descriptor: str) -> list[Classification]:
        """Return every place the descriptor is listed, in traversal order.

        The first element, if any, is the same as :meth:`classify`.
        """
        return list(self._occurrences.get(descriptor.lower(), ()))

    def category_breakdown(self, descriptors: Iterable[str]) -> dict[str, int]:
        """Count descriptors per category.

        Categories appear in catalog order and only when counted at least
        once; unknown descriptors are counted under ``UNCLASSIFIED``, last,
        added to a catalog category of that name if one was counted.

        Example:
            >>> classifier.category_breakdown(["Cherry", "Vanilla", "Oak Chips?"])
            {'Primary (Grape-Derived)': 1, 'Secondary (Winemaking)': 1, 'Other': 1}
        """
        counts: dict[str, int] = {}
        unclassified = 0
        for descriptor in descriptors:
            category = self.category_of(descriptor)
            if category is None:
                unclassified += 1
            else:
                counts[category] = counts.get(category, 0) + 1

        breakdown = {
            c.name: counts[c.name] for c in self.taxonomy.all_categories() if c.name in counts
        }
        if unclassified:
            # a catalog category named like the bucket shares its count
            breakdown[UNCLASSIFIED] = breakdown.get(UNCLASSIFIED, 0) + unclassified
        return breakdown


__all__ = ["DescriptorClassifier", "UNCLASSIFIED"]
