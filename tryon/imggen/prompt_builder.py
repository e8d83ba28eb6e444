"""Prompt and part construction for the image model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from tryon.imgproc.encoding import InlineImage
from tryon.state.outfit import DEFAULT_BACKGROUND, DEFAULT_EXPRESSION, POSE_INSTRUCTIONS, OutfitState
from tryon.wardrobe.registry import WardrobeItem

MODEL_CREATION_PROMPT = (
    "You are an expert fashion photographer AI. Transform the person in this image into a "
    "full-body fashion model photo suitable for an e-commerce website. The background must be "
    "a clean, neutral studio backdrop (light gray, #f0f0f0). The person should have a neutral, "
    "professional model expression. Preserve the person's identity, unique features, and body "
    "type, but place them in a standard, relaxed standing model pose. The final image must be "
    "photorealistic. Return ONLY the final image."
)

COMPOSITE_PREAMBLE = (
    "You are an expert virtual try-on AI. You will be given a 'model image' and potentially a "
    "'top garment' and/or a 'bottom garment'. Your task is to create a new photorealistic image "
    "with several modifications.\n\n"
    "**Crucial Rules:**\n"
    "1.  **Preserve the Model's Identity:** The person's face (unless expression is changed), "
    "hair, and unique features MUST be preserved.\n"
    "2.  **Output:** Return ONLY the final, edited image. Do not include any text.\n\n"
    "**Instructions:**\n"
)

TOP_MARKER = "\n--- Top Garment Image --- \n"
BOTTOM_MARKER = "\n--- Bottom Garment Image --- \n"


@dataclass(slots=True, frozen=True)
class CompositeRequest:
    """Ordered parts for one generation call; ``instructions`` is the final text part."""

    parts: tuple[dict[str, Any], ...]
    instructions: str


class CompositeRequestBuilder:
    """Builds the same request, byte for byte, from the same state and images."""

    def __init__(self, pose_catalog: tuple[str, ...] = POSE_INSTRUCTIONS) -> None:
        self._pose_catalog = pose_catalog

    def build(
        self,
        state: OutfitState,
        base_image: InlineImage,
        garment_images: Mapping[str, InlineImage],
    ) -> CompositeRequest:
        """Return parts for ``state`` rendered on top of ``base_image``.

        ``garment_images`` maps wardrobe item ids to their resolved images and
        must cover every worn garment.
        """

        parts: list[dict[str, Any]] = [base_image.to_part()]
        lines: list[str] = []

        if state.top is not None:
            parts.extend(({"text": TOP_MARKER}, self._garment_image(state.top, garment_images).to_part()))
            lines.append(
                "- **Apply Top Garment:** Realistically fit the 'top garment' onto the person. "
                "It should adapt to their pose with natural folds, shadows, and lighting. "
                "Replace any existing upper-body clothing.\n",
            )
            if state.top.active_color:
                lines.append(
                    "  - **Top Color:** The final color of the top garment must be exactly this "
                    f"color: {state.top.active_color}. Maintain texture and lighting.\n",
                )

        if state.bottom is not None:
            parts.extend(
                ({"text": BOTTOM_MARKER}, self._garment_image(state.bottom, garment_images).to_part()),
            )
            lines.append(
                "- **Apply Bottom Garment:** Realistically fit the 'bottom garment' onto the person. "
                "Replace any existing lower-body clothing.\n",
            )
            if state.bottom.active_color:
                lines.append(
                    "  - **Bottom Color:** The final color of the bottom garment must be exactly this "
                    f"color: {state.bottom.active_color}. Maintain texture and lighting.\n",
                )

        lines.append(f'- **Pose:** The model\'s final pose must be: "{self._pose_catalog[state.pose_index]}".\n')

        if state.expression != DEFAULT_EXPRESSION:
            lines.append(
                "- **Facial Expression:** Change the model's facial expression to be convincingly "
                f"'{state.expression}'.\n",
            )

        if state.background != DEFAULT_BACKGROUND:
            lines.append(
                "- **Background:** Replace the entire background with a photorealistic scene of a "
                f"'{state.background}'. The lighting on the model must match the new background.\n",
            )
        else:
            lines.append(
                "- **Preserve Background:** The original background from the 'model image' "
                "MUST be preserved perfectly.\n",
            )

        instructions = COMPOSITE_PREAMBLE + "".join(lines)
        parts.append({"text": instructions})
        return CompositeRequest(parts=tuple(parts), instructions=instructions)

    def build_model_request(self, photo: InlineImage) -> CompositeRequest:
        """Return parts that turn a user photo into the base studio model."""

        return CompositeRequest(
            parts=(photo.to_part(), {"text": MODEL_CREATION_PROMPT}),
            instructions=MODEL_CREATION_PROMPT,
        )

    @staticmethod
    def _garment_image(item: WardrobeItem, garment_images: Mapping[str, InlineImage]) -> InlineImage:
        try:
            return garment_images[item.id]
        except KeyError:
            raise ValueError(f"No image was resolved for garment {item.id!r}.") from None
