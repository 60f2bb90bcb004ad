"""
Configuration model for the aroma wheel.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, field_validator

from .models import LABEL_SEPARATOR


class CatalogVariant(str, Enum):
    """Built-in descriptor catalogs.

    AROMA_WHEEL: Broad aroma-wheel catalog, four categories including faults.
    SYSTEMATIC: Systematic-tasting catalog, primary/secondary/tertiary only.
    """
    AROMA_WHEEL = "aroma_wheel"
    SYSTEMATIC = "systematic"


class AromaWheelConfig(BaseModel):
    """Settings used to build an :class:`~aroma_wheel.wheel.AromaWheel`."""

    catalog: CatalogVariant = Field(
        default=CatalogVariant.AROMA_WHEEL,
        description="Which built-in catalog to load"
    )
    include_faults: bool = Field(
        default=True,
        description="Keep the Faults / Off-Aromas category when the catalog has one"
    )
    search_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of autocomplete results"
    )
    palette_limit: int = Field(
        default=24,
        ge=1,
        description="Maximum number of palette search hits"
    )
    label_separator: str = Field(
        default=LABEL_SEPARATOR,
        description="Separator between category and subcategory in labels"
    )

    @field_validator("catalog", mode="before")
    @classmethod
    def validate_catalog(cls, v: Union[str, CatalogVariant]) -> CatalogVariant:
        """Accept the enum or its value in any case."""
        if isinstance(v, CatalogVariant):
            return v
        if isinstance(v, str):
            try:
                return CatalogVariant(v.strip().lower())
            except ValueError:
                raise ValueError(
                    f"catalog must be one of: {', '.join(c.value for c in CatalogVariant)}"
                )
        raise ValueError(f"catalog must be CatalogVariant or str, got {type(v)}")

    @field_validator("label_separator")
    @classmethod
    def validate_label_separator(cls, v: str) -> str:
        """Ensure the separator is non-empty."""
        if not v or not v.strip():
            raise ValueError("label_separator cannot be empty")
        return v


__all__ = ["AromaWheelConfig", "CatalogVariant"]
