"""Pre-flight checks for user uploads, run before any remote call."""

from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from tryon.config.settings import TryOnSettings
from tryon.imgproc.encoding import InlineImage


class ImageValidationError(ValueError):
    """Raised when an upload is rejected before reaching the models."""


class UploadValidator:
    """Checks type, size and proportions of uploaded photos."""

    def __init__(self, settings: TryOnSettings) -> None:
        self._settings = settings

    def validate_model_photo(self, data: bytes, mime_type: str) -> InlineImage:
        """Return the upload as an inline image or raise ``ImageValidationError``."""

        if not mime_type or not mime_type.startswith("image/"):
            raise ImageValidationError("Please select a valid image file (e.g., PNG, JPEG).")

        if len(data) > self._settings.max_upload_bytes:
            raise ImageValidationError(
                f"File is too large. Please upload an image under {self._settings.max_upload_mb}MB.",
            )

        try:
            with Image.open(BytesIO(data)) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageValidationError("Could not read the image file. It might be corrupted.") from exc

        if not height:
            raise ImageValidationError("Could not read the image file. It might be corrupted.")

        aspect_ratio = width / height
        if not self._settings.min_aspect_ratio <= aspect_ratio <= self._settings.max_aspect_ratio:
            raise ImageValidationError(
                "Image aspect ratio is not suitable. "
                "Please use a standard portrait or landscape photo for best results.",
            )
        return InlineImage.from_bytes(data, mime_type)

    def validate_garment_photo(self, data: bytes, mime_type: str) -> InlineImage:
        if not mime_type or not mime_type.startswith("image/"):
            raise ImageValidationError("Please select an image file.")
        return InlineImage.from_bytes(data, mime_type)
