"""
Unit tests for descriptor colour resolution.
"""

import tempfile
from pathlib import Path

import pytest
import yaml

from aroma_wheel import (
    FAULTS_CATEGORY,
    NEUTRAL_CHIP,
    CatalogError,
    ColorPalette,
    ColorResolver,
    ColorStyle,
    DescriptorClassifier,
    Taxonomy,
    load_palette,
)

PRIMARY_COLOR = ColorStyle(background="bg-vine/15", text="text-vine", border="border-vine/30")
TERTIARY_COLOR = ColorStyle(background="bg-grape/15", text="text-grape", border="border-grape/30")
BLACKCURRANT_COLOR = ColorStyle(
    background="bg-[#C4B5FD]/25", text="text-[#6D28D9]", border="border-[#C4B5FD]/40"
)


@pytest.fixture
def resolver(classifier: DescriptorClassifier, palette: ColorPalette) -> ColorResolver:
    return ColorResolver(classifier, palette)


class TestColorPalette:
    """Test the built-in colour tables."""

    def test_every_category_has_a_colour(self, palette: ColorPalette, taxonomy: Taxonomy) -> None:
        for category in taxonomy.all_categories():
            assert category.name in palette.categories

    def test_every_category_has_a_style(self, palette: ColorPalette, taxonomy: Taxonomy) -> None:
        for category in taxonomy.all_categories():
            assert category.name in palette.category_styles

    def test_every_subcategory_has_a_swatch(self, palette: ColorPalette, taxonomy: Taxonomy) -> None:
        for category in taxonomy.all_categories():
            for sub in category.subcategories:
                assert sub.name in palette.swatches

    def test_descriptor_table_size(self, palette: ColorPalette) -> None:
        assert len(palette.descriptors) >= 150

    def test_descriptor_table_keys_are_catalog_terms(
        self, palette: ColorPalette, classifier: DescriptorClassifier
    ) -> None:
        for descriptor in palette.descriptors:
            assert classifier.category_of(descriptor) is not None, descriptor

    def test_tables_are_read_only(self, palette: ColorPalette) -> None:
        with pytest.raises(TypeError):
            palette.descriptors["Blackcurrant"] = PRIMARY_COLOR  # type: ignore[index]


class TestLoadPalette:
    """Test loading colour tables from YAML."""

    def _write(self, data) -> Path:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
            yaml.dump(data, f)
            return Path(f.name)

    def test_load_minimal(self) -> None:
        path = self._write({
            "descriptors": {"Lemon": {"background": "bg-a", "text": "text-a", "border": "border-a"}},
            "categories": {},
        })
        try:
            palette = load_palette(path)
            assert palette.descriptors["Lemon"].background == "bg-a"
            assert dict(palette.swatches) == {}
        finally:
            path.unlink()

    def test_missing_keys(self) -> None:
        path = self._write({"descriptors": {}})
        try:
            with pytest.raises(CatalogError, match="'descriptors' and 'categories'"):
                load_palette(path)
        finally:
            path.unlink()

    def test_invalid_entry(self) -> None:
        path = self._write({
            "descriptors": {"Lemon": {"background": "bg-a"}},
            "categories": {},
        })
        try:
            with pytest.raises(CatalogError, match="colour table 'descriptors'"):
                load_palette(path)
        finally:
            path.unlink()

    def test_table_must_be_mapping(self) -> None:
        path = self._write({"descriptors": ["Lemon"], "categories": {}})
        try:
            with pytest.raises(CatalogError, match="must be a mapping"):
                load_palette(path)
        finally:
            path.unlink()


class TestColorResolver:
    """Test ColorResolver resolution order."""

    def test_exact_match(self, resolver: ColorResolver) -> None:
        assert resolver.color_of("Blackcurrant") == BLACKCURRANT_COLOR

    def test_exact_match_is_case_sensitive(self, resolver: ColorResolver) -> None:
        # falls through to the Primary category colour
        assert resolver.color_of("blackcurrant") == PRIMARY_COLOR
        assert resolver.color_of("BLACKCURRANT") == PRIMARY_COLOR

    def test_category_fallback(self, resolver: ColorResolver, palette: ColorPalette) -> None:
        assert "Truffle" not in palette.descriptors
        assert resolver.color_of("Truffle") == TERTIARY_COLOR

    def test_fault_fallback(self, resolver: ColorResolver, palette: ColorPalette) -> None:
        assert resolver.color_of("Wet Cardboard") == palette.categories[FAULTS_CATEGORY]

    def test_unknown_descriptor(self, resolver: ColorResolver) -> None:
        assert resolver.color_of("CustomUserTerm123") is None
        assert resolver.color_of("") is None

    def test_deterministic(self, resolver: ColorResolver) -> None:
        for descriptor in ["Blackcurrant", "blackcurrant", "Truffle", "CustomUserTerm123"]:
            assert resolver.color_of(descriptor) == resolver.color_of(descriptor)

    def test_category_without_colour(self, taxonomy: Taxonomy) -> None:
        palette = ColorPalette(descriptors={}, categories={})
        resolver = ColorResolver(DescriptorClassifier(taxonomy), palette)
        assert resolver.color_of("Truffle") is None

    def test_css_classes(self, resolver: ColorResolver) -> None:
        assert resolver.css_classes("Truffle") == "bg-grape/15 text-grape border border-grape/30"
        assert resolver.css_classes("CustomUserTerm123") == NEUTRAL_CHIP
        assert resolver.css_classes("CustomUserTerm123", default="chip") == "chip"

    def test_category_style(self, resolver: ColorResolver) -> None:
        style = resolver.category_style("Primary (Grape-Derived)")
        assert style is not None
        assert style.accent == "border-l-vine"
        assert style.badge == "1°"
        assert resolver.category_style(FAULTS_CATEGORY).badge == "!"
        assert resolver.category_style("Unknown") is None

    def test_swatch_for(self, resolver: ColorResolver) -> None:
        swatch = resolver.swatch_for("Oak")
        assert swatch is not None
        assert swatch.text == "text-white"
        assert resolver.swatch_for("Unknown") is None
