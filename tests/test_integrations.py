"""Tests for external integration connectivity helpers."""

from __future__ import annotations

import pytest
import pytest_mock

from tryon.config.settings import get_settings
from tryon.integrations.checks import check_gemini_images, check_gemini_text, run_all_checks


@pytest.fixture(autouse=True)
def _setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini")
    monkeypatch.setenv("GEMINI_BASE_URL", "https://gemini.test/v1beta")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_check_gemini_text_success(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("tryon.integrations.checks.GeminiClient", autospec=True)
    instance = client_mock.return_value
    instance.ping_text = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_gemini_text()

    assert result.success
    instance.ping_text.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_gemini_images_failure(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("tryon.integrations.checks.GeminiClient", autospec=True)
    instance = client_mock.return_value
    instance.ping_images = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_gemini_images()

    assert not result.success
    assert "non-success" in result.message.lower()


@pytest.mark.asyncio
async def test_run_all_checks_reports_exceptions(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("tryon.integrations.checks.GeminiClient", autospec=True)
    instance = client_mock.return_value
    instance.ping_text = mocker.AsyncMock(side_effect=RuntimeError("bad key"))
    instance.ping_images = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    results = await run_all_checks()

    assert [result.name for result in results] == ["Gemini text", "Gemini images"]
    assert results[0].message == "bad key"
    assert results[1].success
    assert instance.close.await_count == 2
