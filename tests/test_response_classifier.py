"""Tests for generation outcome classification."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.factories import image_response
from tryon.api.gemini_client import GeminiRequestError
from tryon.imggen.response import (
    Blocked,
    Empty,
    Refused,
    ResponseClassifier,
    Success,
    TransportFailure,
)
from tryon.imgproc.encoding import InlineImage


@pytest.fixture
def classifier() -> ResponseClassifier:
    return ResponseClassifier()


def test_first_image_part_wins_and_keeps_media_type(classifier: ResponseClassifier) -> None:
    raw = {
        "candidates": [
            {"content": {"parts": [{"text": "Here you go"}]}, "finishReason": "STOP"},
            {
                "content": {
                    "parts": [
                        {"inlineData": {"mimeType": "image/webp", "data": "Zmlyc3Q="}},
                        {"inlineData": {"mimeType": "image/png", "data": "c2Vjb25k"}},
                    ],
                },
            },
        ],
    }

    outcome = classifier.classify(raw)

    assert outcome == Success(image=InlineImage(mime_type="image/webp", data="Zmlyc3Q="))


def test_block_indicator_beats_image(classifier: ResponseClassifier) -> None:
    raw = image_response()
    raw["promptFeedback"] = {"blockReason": "SAFETY", "blockReasonMessage": "Unsafe prompt."}

    outcome = classifier.classify(raw)

    assert outcome == Blocked(reason="SAFETY", detail="Unsafe prompt.")
    assert outcome.message == "Request was blocked. Reason: SAFETY. Unsafe prompt."


def test_image_beats_non_stop_finish_reason(classifier: ResponseClassifier) -> None:
    raw = image_response()
    raw["candidates"][0]["finishReason"] = "MAX_TOKENS"

    assert isinstance(classifier.classify(raw), Success)


def test_safety_finish_without_image_is_refused(classifier: ResponseClassifier) -> None:
    raw = {"candidates": [{"content": {"parts": []}, "finishReason": "SAFETY"}]}

    outcome = classifier.classify(raw)

    assert outcome == Refused(finish_reason="SAFETY")
    assert "Reason: SAFETY" in outcome.message


def test_text_only_response_is_empty_with_fallback(classifier: ResponseClassifier) -> None:
    raw = {
        "candidates": [
            {"content": {"parts": [{"text": "  I cannot edit this photo. "}]}, "finishReason": "STOP"},
        ],
    }

    outcome = classifier.classify(raw)

    assert outcome == Empty(text="I cannot edit this photo.")
    assert 'responded with text: "I cannot edit this photo."' in outcome.message


def test_no_candidates_is_empty_without_text(classifier: ResponseClassifier) -> None:
    outcome = classifier.classify({})

    assert outcome == Empty(text=None)
    assert "safety filters" in outcome.message


def test_malformed_response_is_transport_failure(classifier: ResponseClassifier) -> None:
    outcome = classifier.classify({"candidates": "not-a-list"})

    assert isinstance(outcome, TransportFailure)


def test_failed_call_is_transport_failure(classifier: ResponseClassifier) -> None:
    error = GeminiRequestError("Gemini API returned 401: unauthorized", status_code=401)

    outcome = classifier.classify_failure(error)

    assert outcome.cause is error
    assert "Please try again" in outcome.message
    assert "unauthorized" not in outcome.message


def test_malformed_response_message_hides_parse_details(classifier: ResponseClassifier) -> None:
    outcome = classifier.classify({"candidates": "not-a-list"})

    assert isinstance(outcome.cause, ValidationError)
    assert outcome.message == "The image request did not complete. Please try again."
