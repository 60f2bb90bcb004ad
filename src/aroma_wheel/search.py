"""
Substring search over the descriptor vocabulary, for autocomplete.
"""

from typing import Collection, Iterator

from .models import Category, SearchHit, Subcategory
from .taxonomy import Taxonomy

DEFAULT_LIMIT = 10
DEFAULT_PALETTE_LIMIT = 24


class SearchIndex:
    """Case-insensitive substring search over a taxonomy.

    The flattened vocabulary is deduplicated on exact strings and sorted, so
    results come back in lexicographic order, not ranked by relevance. A
    blank query matches nothing rather than everything.

    Example:
        >>> index = SearchIndex(taxonomy)
        >>> index.search("cherry")
        ['Black Cherry', 'Cherry', 'Red Cherry', 'Sour Cherry']
        >>> index.search("   ")
        []
    """

    def __init__(
        self,
        taxonomy: Taxonomy,
        limit: int = DEFAULT_LIMIT,
        palette_limit: int = DEFAULT_PALETTE_LIMIT,
    ) -> None:
        self.taxonomy = taxonomy
        self.limit = limit
        self.palette_limit = palette_limit
        flattened = {
            descriptor
            for category in taxonomy.all_categories()
            for _, descriptor in category.iter_descriptors()
        }
        self._descriptors: tuple[str, ...] = tuple(sorted(flattened))
        self._lowered: tuple[tuple[str, str], ...] = tuple((d.lower(), d) for d in self._descriptors)

    @property
    def descriptors(self) -> tuple[str, ...]:
        """Every distinct descriptor, sorted."""
        return self._descriptors

    def _matches(self, query: str) -> Iterator[str]:
        needle = query.lower()
        return (d for lowered, d in self._lowered if needle in lowered)

    def search(self, query: str) -> list[str]:
        """Return up to ``limit`` descriptors containing ``query``.

        Returns an empty list for an empty or whitespace-only query.
        """
        if not query.strip():
            return []
        results: list[str] = []
        for descriptor in self._matches(query):
            results.append(descriptor)
            if len(results) >= self.limit:
                break
        return results

    def search_excluding(self, query: str, already_chosen: Collection[str]) -> list[str]:
        """Like :meth:`search`, leaving out descriptors already chosen.

        Exclusions are applied before the cap, so later matches fill the
        freed slots and the result is short only when matches run out.
        """
        if not query.strip():
            return []
        chosen = set(already_chosen)
        results: list[str] = []
        for descriptor in self._matches(query):
            if descriptor in chosen:
                continue
            results.append(descriptor)
            if len(results) >= self.limit:
                break
        return results

    def search_with_context(self, query: str) -> list[SearchHit]:
        """Return matching catalog occurrences with their category and subcategory.

        Walks the catalog in declared order without deduplicating, so a
        descriptor listed in two subcategories yields two hits. Capped at
        ``palette_limit``.
        """
        if not query.strip():
            return []
        needle = query.lower()
        hits: list[SearchHit] = []
        for category in self.taxonomy.all_categories():
            for sub, descriptor in category.iter_descriptors():
                if needle in descriptor.lower():
                    hits.append(
                        SearchHit(descriptor=descriptor, category=category.name, subcategory=sub.name)
                    )
                    if len(hits) >= self.palette_limit:
                        return hits
        return hits

    def filter_categories(self, query: str) -> tuple[Category, ...]:
        """Prune the catalog to descriptors containing ``query``.

        A blank query returns every category unchanged. Otherwise empty
        subcategories and empty categories are dropped.
        """
        if not query.strip():
            return self.taxonomy.all_categories()
        needle = query.lower()
        filtered: list[Category] = []
        for category in self.taxonomy.all_categories():
            subs = []
            for sub in category.subcategories:
                kept = tuple(d for d in sub.descriptors if needle in d.lower())
                if kept:
                    subs.append(Subcategory(name=sub.name, descriptors=kept))
            if subs:
                filtered.append(Category(name=category.name, subcategories=tuple(subs)))
        return tuple(filtered)


__all__ = ["DEFAULT_LIMIT", "DEFAULT_PALETTE_LIMIT", "SearchIndex"]
