"""
Data models for the descriptor taxonomy.

All models are frozen and use tuples for their collections, so a loaded
catalog cannot be changed after construction.
"""

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

LABEL_SEPARATOR = " › "


class Subcategory(BaseModel):
    """A thematic group of descriptors inside one category.

    Attributes:
        name: Display name, unique within the parent category (e.g., "Black Fruit")
        descriptors: Descriptor terms in display casing and declared order
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Subcategory display name")
    descriptors: tuple[str, ...] = Field(default_factory=tuple, description="Descriptor terms")


class Category(BaseModel):
    """A top-level grouping of descriptors by origin.

    The name doubles as the display label and as the key into the category
    colour table, e.g. "Primary (Grape-Derived)".

    Attributes:
        name: Display name, unique within a taxonomy
        subcategories: Subcategories in display order
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Category display name")
    subcategories: tuple[Subcategory, ...] = Field(default_factory=tuple, description="Ordered subcategories")

    def iter_descriptors(self) -> Iterator[tuple[Subcategory, str]]:
        """Yield ``(subcategory, descriptor)`` pairs in declared order."""
        for sub in self.subcategories:
            for descriptor in sub.descriptors:
                yield sub, descriptor


class Classification(BaseModel):
    """Where a descriptor lives in the taxonomy."""
    model_config = ConfigDict(frozen=True)

    category: str
    subcategory: str

    def label(self, separator: str = LABEL_SEPARATOR) -> str:
        """Return the tooltip label, e.g. ``"Primary (Grape-Derived) › Black Fruit"``."""
        return f"{self.category}{separator}{self.subcategory}"


class SearchHit(BaseModel):
    """A single catalog occurrence matched by a palette search."""
    model_config = ConfigDict(frozen=True)

    descriptor: str
    category: str
    subcategory: str


class ColorStyle(BaseModel):
    """Chip styling as three utility-class tokens.

    Attributes:
        background: Background class (e.g., "bg-vine/15")
        text: Text colour class
        border: Border colour class
    """
    model_config = ConfigDict(frozen=True)

    background: str
    text: str
    border: str

    def css_classes(self) -> str:
        """Join the three tokens into a class string with a border."""
        return f"{self.background} {self.text} border {self.border}"


class CategoryStyle(BaseModel):
    """Palette decoration for a category: left accent border and ordinal badge."""
    model_config = ConfigDict(frozen=True)

    accent: str
    badge: str = ""


class PaletteSwatch(BaseModel):
    """Palette grid colours for one subcategory."""
    model_config = ConfigDict(frozen=True)

    background: str
    gradient: str
    text: str
