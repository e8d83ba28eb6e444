"""Image payload helpers: encoding, upload checks and locator resolution."""

from .encoding import InlineImage
from .loader import ImageLoader, ImageLoadError
from .validation import ImageValidationError, UploadValidator

__all__ = ["InlineImage", "ImageLoader", "ImageLoadError", "ImageValidationError", "UploadValidator"]
