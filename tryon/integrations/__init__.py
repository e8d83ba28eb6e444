"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_gemini_images,
    check_gemini_text,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_gemini_images",
    "check_gemini_text",
    "run_all_checks",
]
