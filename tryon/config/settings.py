"""Settings loader for the try-on studio."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

APPLY_MODES = ("staged", "immediate")


def _load_env_file(path: str = ".env") -> None:
    """Populate environment variables from a .env file if present."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(slots=True, frozen=True)
class TryOnSettings:
    """Settings required by the dressing session and its remote collaborators."""

    gemini_api_key: str
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_openai_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    image_model: str = "gemini-2.5-flash-image-preview"
    text_model: str = "gemini-2.5-flash"
    request_timeout: float = 120.0
    apply_mode: str = "staged"
    max_upload_mb: int = 10
    min_aspect_ratio: float = 0.4
    max_aspect_ratio: float = 1.8
    log_level: str = "INFO"

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def auto_apply(self) -> bool:
        """Return ``True`` when every edit should regenerate immediately."""

        return self.apply_mode == "immediate"


def _resolve_apply_mode(raw: str) -> str:
    mode = raw.strip().lower()
    if mode not in APPLY_MODES:
        logger.warning("Unknown apply mode %r; falling back to 'staged'.", raw)
        return "staged"
    return mode


def _build_settings() -> TryOnSettings:
    _load_env_file()
    base_url = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    return TryOnSettings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", "")),
        gemini_base_url=base_url,
        gemini_openai_base_url=os.getenv(
            "GEMINI_OPENAI_BASE_URL",
            f"{base_url.rstrip('/')}/openai/",
        ),
        image_model=os.getenv("TRYON_IMAGE_MODEL", "gemini-2.5-flash-image-preview"),
        text_model=os.getenv("TRYON_TEXT_MODEL", "gemini-2.5-flash"),
        request_timeout=float(os.getenv("TRYON_REQUEST_TIMEOUT", "120")),
        apply_mode=_resolve_apply_mode(os.getenv("TRYON_APPLY_MODE", "staged")),
        max_upload_mb=int(os.getenv("TRYON_MAX_UPLOAD_MB", "10")),
        min_aspect_ratio=float(os.getenv("TRYON_MIN_ASPECT_RATIO", "0.4")),
        max_aspect_ratio=float(os.getenv("TRYON_MAX_ASPECT_RATIO", "1.8")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_settings() -> TryOnSettings:
    """Return cached settings instance."""

    return _build_settings()
