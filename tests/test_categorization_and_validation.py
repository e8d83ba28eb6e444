"""Tests for garment categorisation and free-text scene validation."""

from __future__ import annotations

import pytest
import pytest_mock

from tryon.api.gemini_client import GeminiClient, GeminiRequestError
from tryon.imgproc.encoding import InlineImage
from tryon.nlp import SceneField, SceneValidator, rejection_message
from tryon.nlp.scene_validator import build_validation_prompt
from tryon.wardrobe import GarmentCategory
from tryon.wardrobe.classifier import CategorizationError, GarmentClassifier, normalize_category

UPLOAD = InlineImage(mime_type="image/png", data="dXBsb2Fk")


@pytest.mark.parametrize(
    ("label", "expected"),
    [("top", GarmentCategory.TOP), ("TOP", GarmentCategory.TOP), (" Bottom\n", GarmentCategory.BOTTOM)],
)
def test_normalize_category_accepts_top_and_bottom(label: str, expected: GarmentCategory) -> None:
    assert normalize_category(label) is expected


@pytest.mark.parametrize("label", ["jacket", "", "top.", "shoes"])
def test_normalize_category_rejects_other_labels(label: str) -> None:
    with pytest.raises(CategorizationError):
        normalize_category(label)


@pytest.mark.asyncio
async def test_build_item_synthesizes_unique_identity(mocker: pytest_mock.MockerFixture) -> None:
    client = mocker.create_autospec(GeminiClient, instance=True)
    client.describe_image.return_value = "TOP"
    classifier = GarmentClassifier(client)

    first = await classifier.build_item(UPLOAD, "shirt.png")
    second = await classifier.build_item(UPLOAD, "shirt.png")

    assert first.category is GarmentCategory.TOP
    assert first.name == "shirt.png"
    assert first.url == "data:image/png;base64,dXBsb2Fk"
    assert first.id.startswith("custom-")
    assert first.id != second.id


@pytest.mark.asyncio
async def test_classify_surfaces_unexpected_label(mocker: pytest_mock.MockerFixture) -> None:
    client = mocker.create_autospec(GeminiClient, instance=True)
    client.describe_image.return_value = "jacket"

    with pytest.raises(CategorizationError, match='Model returned: "jacket"'):
        await GarmentClassifier(client).classify(UPLOAD)


@pytest.mark.asyncio
@pytest.mark.parametrize(("answer", "expected"), [("yes", True), (" Yes.\n", False), ("YES ", True), ("no", False)])
async def test_only_exact_yes_is_valid(
    mocker: pytest_mock.MockerFixture,
    answer: str,
    expected: bool,
) -> None:
    client = mocker.create_autospec(GeminiClient, instance=True)
    client.ask.return_value = answer

    assert await SceneValidator(client).is_valid("Happy", SceneField.EXPRESSION) is expected


@pytest.mark.asyncio
async def test_transport_error_counts_as_rejection(mocker: pytest_mock.MockerFixture) -> None:
    client = mocker.create_autospec(GeminiClient, instance=True)
    client.ask.side_effect = GeminiRequestError("boom")

    assert not await SceneValidator(client).is_valid("City Park at night", SceneField.BACKGROUND)


def test_validation_prompt_names_kind() -> None:
    assert "facial expression?" in build_validation_prompt("Smug", SceneField.EXPRESSION)
    assert "facial scene background?" in build_validation_prompt("Mars", SceneField.BACKGROUND)


def test_rejection_message_echoes_value() -> None:
    message = rejection_message("Mars colony in 2140", SceneField.BACKGROUND)

    assert message == "'Mars colony in 2140' is not a valid background. Please try another."
