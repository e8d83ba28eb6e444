"""Garment categorisation for user uploads."""

from __future__ import annotations

import logging
import uuid

from tryon.api.gemini_client import GeminiClient
from tryon.imgproc.encoding import InlineImage
from tryon.wardrobe.registry import GarmentCategory, ItemId, WardrobeItem

logger = logging.getLogger(__name__)

CATEGORIZE_PROMPT = (
    "Analyze the clothing item in this image. Is it worn on the upper body (a 'top') "
    "or the lower body (a 'bottom')? It can also be underwear. "
    "Respond with only the word 'top' or 'bottom'."
)


class CategorizationError(RuntimeError):
    """Raised when the model label is neither ``top`` nor ``bottom``."""


def normalize_category(raw: str) -> GarmentCategory:
    """Map a model label to a category, accepting only ``top`` and ``bottom``."""

    normalized = raw.strip().lower()
    try:
        return GarmentCategory(normalized)
    except ValueError:
        raise CategorizationError(
            f'Could not categorize garment. Model returned: "{normalized}"',
        ) from None


class GarmentClassifier:
    """Asks the text model which body slot an uploaded garment belongs to."""

    def __init__(self, client: GeminiClient) -> None:
        self._client = client

    async def classify(self, image: InlineImage) -> GarmentCategory:
        label = await self._client.describe_image(image, CATEGORIZE_PROMPT)
        category = normalize_category(label)
        logger.info("Garment categorised as %s", category.value)
        return category

    async def build_item(self, image: InlineImage, filename: str) -> WardrobeItem:
        """Categorise ``image`` and synthesise a wardrobe item with a fresh identity."""

        category = await self.classify(image)
        return WardrobeItem(
            id=ItemId(f"custom-{uuid.uuid4().hex}"),
            name=filename,
            url=image.to_data_url(),
            category=category,
        )
