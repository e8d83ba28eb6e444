"""Sample garments, images and responses used across the tests."""

from __future__ import annotations

from io import BytesIO
from typing import Any

from PIL import Image

from tryon.wardrobe.registry import GarmentCategory, ItemId, WardrobeItem

TEE = WardrobeItem(
    id=ItemId("gemini-tee"),
    name="Gemini Tee",
    url="data:image/png;base64,dGVl",
    category=GarmentCategory.TOP,
)
HOODIE = WardrobeItem(
    id=ItemId("black-hoodie"),
    name="Black Hoodie",
    url="data:image/png;base64,aG9vZGll",
    category=GarmentCategory.TOP,
)
JEANS = WardrobeItem(
    id=ItemId("denim-jeans"),
    name="Denim Jeans",
    url="data:image/jpeg;base64,amVhbnM=",
    category=GarmentCategory.BOTTOM,
)


def png_bytes(width: int = 400, height: int = 600) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color=(240, 240, 240)).save(buffer, format="PNG")
    return buffer.getvalue()


def image_response(mime_type: str = "image/png", data: str = "cmVuZGVy") -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]},
                "finishReason": "STOP",
            },
        ],
    }
