"""Gemini-based image generation service."""

from __future__ import annotations

import logging

from tryon.api.gemini_client import GeminiClient, GeminiRequestError
from tryon.imggen.prompt_builder import CompositeRequest
from tryon.imggen.response import GenerationOutcome, ResponseClassifier

logger = logging.getLogger(__name__)


class ImageGenerationService:
    """Submits a composite request and classifies whatever comes back."""

    def __init__(self, client: GeminiClient, classifier: ResponseClassifier | None = None) -> None:
        self._client = client
        self._classifier = classifier or ResponseClassifier()

    async def generate(self, request: CompositeRequest) -> GenerationOutcome:
        """
        Run one generation call to completion.

        Transport errors are returned as ``TransportFailure`` instead of raised.
        """

        try:
            raw = await self._client.generate_content(request.parts)
        except GeminiRequestError as exc:
            logger.error("Image generation request failed: %s", exc)
            return self._classifier.classify_failure(exc)

        outcome = self._classifier.classify(raw)
        logger.info("Image generation finished with %s", type(outcome).__name__)
        return outcome
