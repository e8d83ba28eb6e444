"""Pending-versus-committed change staging.

All functions here take states by value and return new values; the dressing
session is the only owner that stores them.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypedDict

from tryon.state.outfit import POSE_INSTRUCTIONS, OutfitState
from tryon.wardrobe.catalog import ORIGINAL_COLOR
from tryon.wardrobe.registry import GarmentCategory, WardrobeItem


class InvalidPoseError(ValueError):
    """Raised when a pose index falls outside the pose catalog."""


class OutfitPatch(TypedDict, total=False):
    """Partial update of an ``OutfitState``; ``None`` clears a garment slot."""

    top: WardrobeItem | None
    bottom: WardrobeItem | None
    expression: str
    background: str
    pose_index: int


def _garment_changed(pending: WardrobeItem | None, committed: WardrobeItem | None) -> bool:
    if pending is None or committed is None:
        return pending is not committed
    return pending.id != committed.id or pending.active_color != committed.active_color


class ChangeStager:
    """Stages user edits and decides whether a regeneration is warranted."""

    def __init__(self, pose_catalog: tuple[str, ...] = POSE_INSTRUCTIONS) -> None:
        self._pose_catalog = pose_catalog

    def diff(self, pending: OutfitState, committed: OutfitState) -> bool:
        """Return ``True`` when ``pending`` would render differently from ``committed``."""

        return (
            _garment_changed(pending.top, committed.top)
            or _garment_changed(pending.bottom, committed.bottom)
            or pending.expression != committed.expression
            or pending.background != committed.background
            or pending.pose_index != committed.pose_index
        )

    def stage_patch(self, pending: OutfitState, patch: OutfitPatch) -> OutfitState:
        """Apply ``patch`` to ``pending`` and return the new pending state."""

        if "pose_index" in patch:
            self.check_pose(patch["pose_index"])
        for slot, category in (("top", GarmentCategory.TOP), ("bottom", GarmentCategory.BOTTOM)):
            item = patch.get(slot)
            if item is not None and item.category is not category:
                raise ValueError(f"{item.name} is a {item.category.value}, not a {category.value}.")
        return replace(pending, **patch)

    def commit(self, pending: OutfitState) -> OutfitState:
        """Return the committed state for a successfully rendered ``pending``."""

        return replace(pending)

    def check_pose(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidPoseError(f"Pose index must be an integer, got {index!r}.")
        if not 0 <= index < len(self._pose_catalog):
            raise InvalidPoseError(
                f"Pose index {index} is out of range (0-{len(self._pose_catalog) - 1}).",
            )
        return index

    def select_garment(self, pending: OutfitState, item: WardrobeItem) -> OutfitState:
        slot = "top" if item.category is GarmentCategory.TOP else "bottom"
        return self.stage_patch(pending, {slot: item})  # type: ignore[misc]

    def remove_garment(self, pending: OutfitState, category: GarmentCategory) -> OutfitState:
        if category is GarmentCategory.TOP:
            return self.stage_patch(pending, {"top": None})
        return self.stage_patch(pending, {"bottom": None})

    def change_color(self, pending: OutfitState, category: GarmentCategory, color: str) -> OutfitState:
        """Recolour the garment in ``category``.

        ``"original"`` clears the override. An empty slot is left as it is.
        """

        current = pending.garment(category)
        if current is None:
            return pending
        recolored = current.with_color(None if color == ORIGINAL_COLOR else color)
        return self.select_garment(pending, recolored)
