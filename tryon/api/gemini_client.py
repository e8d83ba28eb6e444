"""Async wrapper around the Gemini API endpoints used by the studio."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx
from openai import APIError, APIStatusError, AsyncOpenAI

from tryon.config.settings import TryOnSettings
from tryon.imgproc.encoding import InlineImage

logger = logging.getLogger(__name__)

IMAGE_AND_TEXT = ("IMAGE", "TEXT")


class GeminiRequestError(RuntimeError):
    """Raised when a Gemini call cannot complete (network, auth, bad request)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GeminiClient:
    """Native ``generateContent`` calls for images, chat completions for short text answers."""

    def __init__(
        self,
        settings: TryOnSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        openai_client: AsyncOpenAI | None = None,
    ) -> None:
        self._settings = settings
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.gemini_base_url.rstrip("/"),
            timeout=settings.request_timeout,
            headers={"x-goog-api-key": settings.gemini_api_key},
        )
        self._openai = openai_client or AsyncOpenAI(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_openai_base_url,
            timeout=settings.request_timeout,
        )

    async def close(self) -> None:
        """Close the underlying HTTP clients."""

        await self._client.aclose()
        await self._openai.close()

    async def _request_json(
        self,
        method: str,
        endpoint: str,
        *,
        json_body: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = await self._client.request(method, endpoint, json=json_body)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except httpx.TimeoutException as exc:
            raise GeminiRequestError("Timed out waiting for the Gemini API.") from exc
        except httpx.HTTPStatusError as exc:
            raise GeminiRequestError(
                f"Gemini API returned {exc.response.status_code}: {exc.response.text}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise GeminiRequestError(f"Could not reach the Gemini API: {exc}") from exc
        except ValueError as exc:
            raise GeminiRequestError("Gemini API returned a body that is not JSON.") from exc

    async def generate_content(
        self,
        parts: Sequence[Mapping[str, Any]],
        *,
        response_modalities: Sequence[str] = IMAGE_AND_TEXT,
    ) -> dict[str, Any]:
        """Send ordered parts to the image model and return the raw response body."""

        body = {
            "contents": [{"role": "user", "parts": list(parts)}],
            "generationConfig": {"responseModalities": list(response_modalities)},
        }
        endpoint = f"/models/{self._settings.image_model}:generateContent"
        logger.debug("Calling %s with %d parts", endpoint, len(body["contents"][0]["parts"]))
        return await self._request_json("POST", endpoint, json_body=body)

    async def _complete(self, content: str | list[dict[str, Any]]) -> str:
        try:
            response = await self._openai.chat.completions.create(
                model=self._settings.text_model,
                messages=[{"role": "user", "content": content}],
            )
        except APIStatusError as exc:
            raise GeminiRequestError(
                f"Gemini API returned {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except APIError as exc:
            raise GeminiRequestError(f"Gemini text request failed: {exc}") from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def describe_image(self, image: InlineImage, prompt: str) -> str:
        """Ask the text model a question about one image and return its answer."""

        return await self._complete(
            [
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": image.to_data_url()}},
            ],
        )

    async def ask(self, prompt: str) -> str:
        """Send a text-only prompt and return the answer."""

        return await self._complete(prompt)

    async def ping_text(self) -> bool:
        """Return ``True`` when the OpenAI-compatible endpoint lists models."""

        models = await self._openai.models.list()
        return bool(models.data)

    async def ping_images(self) -> bool:
        """Return ``True`` when the configured image model is known to the API."""

        payload = await self._request_json("GET", f"/models/{self._settings.image_model}")
        return bool(payload.get("name"))
