"""
Pytest configuration and fixtures for aroma-wheel tests.
"""

import pytest

from aroma_wheel import (
    AromaWheel,
    CatalogVariant,
    ColorPalette,
    DescriptorClassifier,
    SearchIndex,
    Taxonomy,
    get_default_wheel,
    load_builtin_catalog,
    load_builtin_palette,
)


@pytest.fixture
def taxonomy() -> Taxonomy:
    """The default aroma-wheel catalog, faults included."""
    return load_builtin_catalog(CatalogVariant.AROMA_WHEEL)


@pytest.fixture
def systematic_taxonomy() -> Taxonomy:
    """The three-category systematic-tasting catalog."""
    return load_builtin_catalog(CatalogVariant.SYSTEMATIC)


@pytest.fixture
def palette() -> ColorPalette:
    """The built-in colour tables."""
    return load_builtin_palette()


@pytest.fixture
def classifier(taxonomy: Taxonomy) -> DescriptorClassifier:
    return DescriptorClassifier(taxonomy)


@pytest.fixture
def index(taxonomy: Taxonomy) -> SearchIndex:
    return SearchIndex(taxonomy)


@pytest.fixture
def wheel() -> AromaWheel:
    """The shared default wheel."""
    return get_default_wheel()
