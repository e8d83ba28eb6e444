"""Outfit state model and change staging."""

from .outfit import (
    BACKGROUND_PRESETS,
    DEFAULT_BACKGROUND,
    DEFAULT_EXPRESSION,
    EXPRESSION_PRESETS,
    POSE_INSTRUCTIONS,
    OutfitState,
)
from .stager import ChangeStager, InvalidPoseError, OutfitPatch

__all__ = [
    "BACKGROUND_PRESETS",
    "DEFAULT_BACKGROUND",
    "DEFAULT_EXPRESSION",
    "EXPRESSION_PRESETS",
    "POSE_INSTRUCTIONS",
    "ChangeStager",
    "InvalidPoseError",
    "OutfitPatch",
    "OutfitState",
]
