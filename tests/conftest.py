"""Shared fixtures for the try-on studio tests."""

from __future__ import annotations

import pytest

from tryon.config.settings import TryOnSettings
from tryon.imgproc.encoding import InlineImage


@pytest.fixture
def settings() -> TryOnSettings:
    return TryOnSettings(gemini_api_key="test-key")


@pytest.fixture
def base_image() -> InlineImage:
    return InlineImage(mime_type="image/png", data="YmFzZQ==")
