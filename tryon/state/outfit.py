"""Outfit and scene selection shared by the committed and pending states."""

from __future__ import annotations

from dataclasses import dataclass

from tryon.wardrobe.registry import GarmentCategory, WardrobeItem

DEFAULT_EXPRESSION = "Default"
DEFAULT_BACKGROUND = "Original Studio"

POSE_INSTRUCTIONS: tuple[str, ...] = (
    "Full frontal view, hands on hips",
    "Slightly turned, 3/4 view",
    "Side profile view",
    "Jumping in the air, mid-action shot",
    "Walking towards camera",
    "Leaning against a wall",
)

EXPRESSION_PRESETS: tuple[str, ...] = (DEFAULT_EXPRESSION, "Happy", "Laughing", "Surprised", "Stoic")
BACKGROUND_PRESETS: tuple[str, ...] = (
    DEFAULT_BACKGROUND,
    "City Park",
    "Beach at Sunset",
    "Modern Loft",
    "Basketball Court",
)


@dataclass(slots=True, frozen=True)
class OutfitState:
    """Garments worn plus scene settings for one rendered (or to-be-rendered) image."""

    top: WardrobeItem | None = None
    bottom: WardrobeItem | None = None
    expression: str = DEFAULT_EXPRESSION
    background: str = DEFAULT_BACKGROUND
    pose_index: int = 0

    def garment(self, category: GarmentCategory) -> WardrobeItem | None:
        return self.top if category is GarmentCategory.TOP else self.bottom
