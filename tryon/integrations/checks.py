"""Connectivity checks for the Gemini endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from tryon.api.gemini_client import GeminiClient
from tryon.config.settings import get_settings


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:  # pragma: no cover - reported, not raised
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
    )


async def _with_client(probe: Callable[[GeminiClient], Awaitable[bool]]) -> bool:
    client = GeminiClient(get_settings())
    try:
        return await probe(client)
    finally:
        await client.close()


async def check_gemini_text() -> IntegrationCheckResult:
    """List models through the OpenAI-compatible endpoint."""

    return await _run_check(
        name="Gemini text",
        factory=lambda: _with_client(lambda client: client.ping_text()),
        success_message="OpenAI-compatible endpoint is reachable.",
    )


async def check_gemini_images() -> IntegrationCheckResult:
    """Fetch metadata of the configured image model."""

    settings = get_settings()
    return await _run_check(
        name="Gemini images",
        factory=lambda: _with_client(lambda client: client.ping_images()),
        success_message=f"Image model {settings.image_model} is available.",
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_gemini_text(), check_gemini_images()))
