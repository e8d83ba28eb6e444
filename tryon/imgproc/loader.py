"""Resolve garment image locators into inline image payloads."""

from __future__ import annotations

import logging

import httpx

from tryon.imgproc.encoding import InlineImage

logger = logging.getLogger(__name__)


class ImageLoadError(RuntimeError):
    """Raised when a garment image cannot be fetched or decoded."""


class ImageLoader:
    """Turns ``data:`` URLs and remote image URLs into ``InlineImage`` values."""

    def __init__(self, *, timeout: float = 15.0, http_client: httpx.AsyncClient | None = None) -> None:
        self._client = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def close(self) -> None:
        await self._client.aclose()

    async def load(self, locator: str) -> InlineImage:
        """Return the image behind ``locator``."""

        if locator.startswith("data:"):
            try:
                return InlineImage.from_data_url(locator)
            except ValueError as exc:
                raise ImageLoadError(f"Garment image data is invalid: {exc}") from exc

        try:
            response = await self._client.get(locator)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ImageLoadError(
                f"Image server returned {exc.response.status_code} for {locator}.",
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Failed to fetch garment image %s: %s", locator, exc)
            raise ImageLoadError(f"Failed to fetch image from {locator}.") from exc

        content_type = response.headers.get("content-type", "").split(";", 1)[0].strip()
        if not content_type.startswith("image/"):
            raise ImageLoadError(f"URL is not a direct image link: {locator}")
        return InlineImage.from_bytes(response.content, content_type)
