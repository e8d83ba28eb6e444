"""Prompt building, image generation and outcome classification."""

from .image_gen import ImageGenerationService
from .prompt_builder import CompositeRequest, CompositeRequestBuilder
from .response import (
    Blocked,
    Empty,
    GenerationOutcome,
    GenerationResponse,
    Refused,
    ResponseClassifier,
    Success,
    TransportFailure,
)

__all__ = [
    "Blocked",
    "CompositeRequest",
    "CompositeRequestBuilder",
    "Empty",
    "GenerationOutcome",
    "GenerationResponse",
    "ImageGenerationService",
    "Refused",
    "ResponseClassifier",
    "Success",
    "TransportFailure",
]
