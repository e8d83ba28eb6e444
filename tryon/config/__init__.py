"""Configuration helpers."""

from .settings import TryOnSettings, get_settings

__all__ = ["TryOnSettings", "get_settings"]
