"""Remote sanity check for free-text expression and background values."""

from __future__ import annotations

import logging
from enum import Enum

from tryon.api.gemini_client import GeminiClient, GeminiRequestError

logger = logging.getLogger(__name__)


class SceneField(str, Enum):
    EXPRESSION = "expression"
    BACKGROUND = "background"


def build_validation_prompt(candidate: str, field: SceneField) -> str:
    subject = "expression" if field is SceneField.EXPRESSION else "scene background"
    return (
        f'Is "{candidate}" a valid and safe description for a person\'s facial {subject}? '
        "The description must not be a person, place, or thing that is copyrighted. "
        "Respond with only 'yes' or 'no'."
    )


class SceneValidator:
    """Accepts a value only when the text model answers exactly ``yes``."""

    def __init__(self, client: GeminiClient) -> None:
        self._client = client

    async def is_valid(self, candidate: str, field: SceneField) -> bool:
        try:
            answer = await self._client.ask(build_validation_prompt(candidate, field))
        except GeminiRequestError as exc:
            logger.warning("Could not validate %s %r: %s", field.value, candidate, exc)
            return False
        accepted = answer.strip().lower() == "yes"
        if not accepted:
            logger.info("Rejected %s %r (model answered %r)", field.value, candidate, answer)
        return accepted


def rejection_message(candidate: str, field: SceneField) -> str:
    return f"'{candidate}' is not a valid {field.value}. Please try another."
