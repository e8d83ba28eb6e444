"""Dressing-session orchestration: edits, staging, regeneration and error reporting."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from tryon.api.gemini_client import GeminiClient, GeminiRequestError
from tryon.config.settings import TryOnSettings
from tryon.imggen import (
    CompositeRequestBuilder,
    GenerationOutcome,
    ImageGenerationService,
    Success,
)
from tryon.imgproc import ImageLoader, ImageLoadError, ImageValidationError, InlineImage, UploadValidator
from tryon.nlp import SceneField, SceneValidator, rejection_message
from tryon.state import (
    BACKGROUND_PRESETS,
    EXPRESSION_PRESETS,
    ChangeStager,
    InvalidPoseError,
    OutfitState,
)
from tryon.wardrobe import GarmentCategory, ItemId, WardrobeItem, WardrobePartition, WardrobeRegistry, default_registry
from tryon.wardrobe.classifier import CategorizationError, GarmentClassifier

logger = logging.getLogger(__name__)


class SessionBusyError(RuntimeError):
    """Raised when an edit or remote call is attempted during another remote call."""


class SessionNotStartedError(RuntimeError):
    """Raised when the outfit is edited before a base model exists."""


def friendly_message(context: str, cause: object) -> str:
    return f"{context}. {cause}"


class TryOnLogic:
    """Owns the committed and pending outfit states of one dressing session.

    Every edit lands in the pending state. ``apply_changes`` renders the
    pending state and, only on success, commits it together with the new
    image. Failures of any kind end up in ``error`` and never touch the
    committed state.
    """

    def __init__(
        self,
        settings: TryOnSettings,
        client: GeminiClient,
        *,
        registry: WardrobeRegistry | None = None,
        loader: ImageLoader | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._registry = registry if registry is not None else default_registry()
        self._owns_loader = loader is None
        self._loader = loader or ImageLoader()
        self._stager = ChangeStager()
        self._builder = CompositeRequestBuilder()
        self._image_service = ImageGenerationService(client)
        self._garment_classifier = GarmentClassifier(client)
        self._scene_validator = SceneValidator(client)
        self._uploads = UploadValidator(settings)
        self._garment_images: dict[ItemId, InlineImage] = {}

        self._base_image: InlineImage | None = None
        self._display_image: InlineImage | None = None
        self._committed: OutfitState | None = None
        self._pending: OutfitState | None = None
        self._busy = False
        self.error: str | None = None

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def is_started(self) -> bool:
        return self._base_image is not None

    @property
    def base_image(self) -> InlineImage | None:
        return self._base_image

    @property
    def display_image(self) -> InlineImage | None:
        return self._display_image

    @property
    def committed(self) -> OutfitState | None:
        return self._committed

    @property
    def pending(self) -> OutfitState | None:
        return self._pending

    @property
    def registry(self) -> WardrobeRegistry:
        return self._registry

    @property
    def wardrobe(self) -> WardrobePartition:
        return self._registry.partition()

    @property
    def has_pending_changes(self) -> bool:
        if self._pending is None or self._committed is None:
            return False
        return self._stager.diff(self._pending, self._committed)

    async def close(self) -> None:
        """Release the image loader if this session created it."""

        if self._owns_loader:
            await self._loader.close()

    @contextmanager
    def _running(self) -> Iterator[None]:
        if self._busy:
            raise SessionBusyError("Another request is still running.")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _editable_pending(self) -> OutfitState:
        if self._busy:
            logger.warning("Edit rejected while a request is in flight.")
            raise SessionBusyError("Another request is still running.")
        if self._pending is None or self._committed is None or self._base_image is None:
            raise SessionNotStartedError("Create a model before changing the outfit.")
        return self._pending

    async def _stage(self, pending: OutfitState) -> bool:
        self.error = None
        self._pending = pending
        if self._settings.auto_apply:
            await self.apply_changes()
        return True

    async def create_model(self, data: bytes, mime_type: str) -> bool:
        """Turn an uploaded photo into the base model and start a fresh outfit."""

        if self._busy:
            raise SessionBusyError("Another request is still running.")
        self.error = None
        try:
            photo = self._uploads.validate_model_photo(data, mime_type)
        except ImageValidationError as exc:
            self.error = str(exc)
            return False

        with self._running():
            outcome = await self._image_service.generate(self._builder.build_model_request(photo))

        if not isinstance(outcome, Success):
            self.error = friendly_message("Failed to create model", outcome.message)
            return False

        self._base_image = outcome.image
        self._display_image = outcome.image
        self._committed = OutfitState()
        self._pending = OutfitState()
        return True

    async def select_garment(self, item_id: str) -> bool:
        """Stage a registry garment in its category's slot."""

        pending = self._editable_pending()
        item = self._registry.get(item_id)
        if item is None:
            self.error = f"Unknown wardrobe item: {item_id}"
            return False
        worn = pending.garment(item.category)
        if worn is not None and worn.id == item.id:
            return False

        self.error = None
        try:
            with self._running():
                await self._resolve_garment(item)
        except ImageLoadError as exc:
            logger.warning("Wardrobe item %s could not be loaded: %s", item.id, exc)
            self.error = friendly_message("Failed to load wardrobe item", exc)
            return False
        return await self._stage(self._stager.select_garment(pending, item))

    async def remove_garment(self, category: GarmentCategory) -> bool:
        pending = self._editable_pending()
        return await self._stage(self._stager.remove_garment(pending, category))

    async def change_color(self, category: GarmentCategory, color: str) -> bool:
        """Recolour a worn garment; ``"original"`` restores its own colour."""

        pending = self._editable_pending()
        if pending.garment(category) is None:
            return False
        return await self._stage(self._stager.change_color(pending, category, color))

    async def select_pose(self, index: int) -> bool:
        pending = self._editable_pending()
        try:
            staged = self._stager.stage_patch(pending, {"pose_index": index})
        except InvalidPoseError as exc:
            self.error = str(exc)
            return False
        return await self._stage(staged)

    async def set_expression(self, value: str) -> bool:
        return await self._set_scene(SceneField.EXPRESSION, value)

    async def set_background(self, value: str) -> bool:
        return await self._set_scene(SceneField.BACKGROUND, value)

    async def _set_scene(self, field: SceneField, value: str) -> bool:
        self._editable_pending()
        value = value.strip()
        if not value:
            return False

        presets = EXPRESSION_PRESETS if field is SceneField.EXPRESSION else BACKGROUND_PRESETS
        if value not in presets:
            self.error = None
            with self._running():
                accepted = await self._scene_validator.is_valid(value, field)
            if not accepted:
                self.error = rejection_message(value, field)
                return False

        if field is SceneField.EXPRESSION:
            staged = self._stager.stage_patch(self._pending, {"expression": value})
        else:
            staged = self._stager.stage_patch(self._pending, {"background": value})
        return await self._stage(staged)

    async def upload_garment(self, data: bytes, mime_type: str, filename: str) -> WardrobeItem | None:
        """Categorise an uploaded garment, add it to the wardrobe and wear it."""

        self._editable_pending()
        self.error = None
        try:
            image = self._uploads.validate_garment_photo(data, mime_type)
        except ImageValidationError as exc:
            self.error = str(exc)
            return None

        try:
            with self._running():
                item = await self._garment_classifier.build_item(image, filename)
        except (CategorizationError, GeminiRequestError) as exc:
            logger.info("Garment upload %s rejected: %s", filename, exc)
            self.error = friendly_message("Failed to categorize garment", exc)
            return None

        self._registry.insert(item)
        self._garment_images[item.id] = image
        await self._stage(self._stager.select_garment(self._pending, item))
        return item

    async def apply_changes(self) -> GenerationOutcome | None:
        """Render the pending state; commit it only if an image comes back.

        Returns ``None`` when there is nothing to render.
        """

        pending = self._editable_pending()
        if not self._stager.diff(pending, self._committed):
            return None

        self.error = None
        with self._running():
            logger.info(
                "Regenerating: top=%s bottom=%s pose=%d",
                pending.top.id if pending.top else None,
                pending.bottom.id if pending.bottom else None,
                pending.pose_index,
            )
            outcome = await self._render(pending)

        if isinstance(outcome, Success):
            self._display_image = outcome.image
            self._committed = self._stager.commit(pending)
        else:
            logger.warning("Regeneration failed: %r", outcome)
            self.error = friendly_message("Failed to update the image", outcome.message)
        return outcome

    async def _render(self, state: OutfitState) -> GenerationOutcome:
        garment_images = await self._resolve_garments(state)
        request = self._builder.build(state, self._base_image, garment_images)
        return await self._image_service.generate(request)

    async def _resolve_garment(self, item: WardrobeItem) -> InlineImage:
        image = self._garment_images.get(item.id)
        if image is None:
            image = await self._loader.load(item.url)
            self._garment_images[item.id] = image
        return image

    async def _resolve_garments(self, state: OutfitState) -> dict[ItemId, InlineImage]:
        for item in (state.top, state.bottom):
            if item is not None:
                await self._resolve_garment(item)
        return self._garment_images

    def start_over(self) -> None:
        """Drop the model, both outfit states and any uploaded garments."""

        if self._busy:
            raise SessionBusyError("Another request is still running.")
        self._registry = default_registry()
        self._garment_images = {}
        self._base_image = None
        self._display_image = None
        self._committed = None
        self._pending = None
        self.error = None
