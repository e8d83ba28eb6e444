"""Typed view of a generation response and the outcome classifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tryon.imgproc.encoding import InlineImage

logger = logging.getLogger(__name__)

NORMAL_FINISH = "STOP"


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class InlineData(_ApiModel):
    mime_type: str = Field(alias="mimeType")
    data: str


class ResponsePart(_ApiModel):
    text: str | None = None
    inline_data: InlineData | None = Field(default=None, alias="inlineData")


class CandidateContent(_ApiModel):
    parts: list[ResponsePart] = Field(default_factory=list)


class Candidate(_ApiModel):
    content: CandidateContent | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class PromptFeedback(_ApiModel):
    block_reason: str | None = Field(default=None, alias="blockReason")
    block_reason_message: str | None = Field(default=None, alias="blockReasonMessage")


class GenerationResponse(_ApiModel):
    """The fields of a ``generateContent`` response that drive classification."""

    candidates: list[Candidate] = Field(default_factory=list)
    prompt_feedback: PromptFeedback | None = Field(default=None, alias="promptFeedback")

    @property
    def text(self) -> str:
        """Concatenated text parts of the first candidate."""

        if not self.candidates or self.candidates[0].content is None:
            return ""
        return "".join(part.text for part in self.candidates[0].content.parts if part.text)


@dataclass(slots=True, frozen=True)
class Success:
    image: InlineImage

    @property
    def message(self) -> str:
        return "Image generated."


@dataclass(slots=True, frozen=True)
class Blocked:
    reason: str
    detail: str | None = None

    @property
    def message(self) -> str:
        return f"Request was blocked. Reason: {self.reason}. {self.detail or ''}".rstrip()


@dataclass(slots=True, frozen=True)
class Refused:
    finish_reason: str

    @property
    def message(self) -> str:
        return (
            f"Image generation stopped unexpectedly. Reason: {self.finish_reason}. "
            "This often relates to safety settings."
        )


@dataclass(slots=True, frozen=True)
class Empty:
    text: str | None = None

    @property
    def message(self) -> str:
        if self.text:
            return f'The AI model did not return an image. The model responded with text: "{self.text}"'
        return (
            "The AI model did not return an image. This can happen due to safety filters "
            "or if the request is too complex. Please try a different image."
        )


@dataclass(slots=True, frozen=True)
class TransportFailure:
    cause: Exception

    @property
    def message(self) -> str:
        return "The image request did not complete. Please try again."


GenerationOutcome = Union[Success, Blocked, Refused, Empty, TransportFailure]


class ResponseClassifier:
    """Maps a raw generation response, or a failed call, to exactly one outcome.

    Checks run in a fixed order: block indicator, then image parts, then the
    first candidate's finish reason, then the text fallback.
    """

    def classify(self, raw: Mapping[str, Any] | GenerationResponse) -> GenerationOutcome:
        if isinstance(raw, GenerationResponse):
            response = raw
        else:
            try:
                response = GenerationResponse.model_validate(raw)
            except ValidationError as exc:
                logger.error("Generation response has an unexpected shape: %s", exc)
                return TransportFailure(cause=exc)

        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            return Blocked(reason=feedback.block_reason, detail=feedback.block_reason_message)

        for candidate in response.candidates:
            if candidate.content is None:
                continue
            for part in candidate.content.parts:
                if part.inline_data is not None:
                    return Success(
                        image=InlineImage(
                            mime_type=part.inline_data.mime_type,
                            data=part.inline_data.data,
                        ),
                    )

        finish_reason = response.candidates[0].finish_reason if response.candidates else None
        if finish_reason and finish_reason != NORMAL_FINISH:
            return Refused(finish_reason=finish_reason)

        return Empty(text=response.text.strip() or None)

    def classify_failure(self, exc: Exception) -> TransportFailure:
        return TransportFailure(cause=exc)
