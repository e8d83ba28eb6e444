"""Free-text scene input validation."""

from .scene_validator import SceneField, SceneValidator, rejection_message

__all__ = ["SceneField", "SceneValidator", "rejection_message"]
