"""Wardrobe registry, default catalog and upload categorisation."""

from .catalog import COLOR_PALETTE, DEFAULT_WARDROBE, ORIGINAL_COLOR, default_registry
from .registry import (
    CategoryView,
    GarmentCategory,
    ItemId,
    WardrobeItem,
    WardrobePartition,
    WardrobeRegistry,
)

__all__ = [
    "COLOR_PALETTE",
    "DEFAULT_WARDROBE",
    "ORIGINAL_COLOR",
    "CategoryView",
    "GarmentCategory",
    "ItemId",
    "WardrobeItem",
    "WardrobePartition",
    "WardrobeRegistry",
    "default_registry",
]
