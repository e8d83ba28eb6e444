"""Remote API clients."""

from .gemini_client import GeminiClient, GeminiRequestError

__all__ = ["GeminiClient", "GeminiRequestError"]
