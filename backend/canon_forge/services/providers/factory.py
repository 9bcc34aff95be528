"""Selects the active provider adapter from configuration."""
from canon_forge.core.config import Settings
from canon_forge.services.providers.base import ImageProvider
from canon_forge.services.providers.gemini import GeminiImageProvider
from canon_forge.services.providers.pollinations import PollinationsImageProvider


def build_provider(settings: Settings) -> ImageProvider:
    """Return the adapter named by `settings.image_provider`."""
    if settings.image_provider == "gemini":
        return GeminiImageProvider(api_key=settings.gemini_api_key, model=settings.gemini_model)
    return PollinationsImageProvider(
        base_url=settings.pollinations_base_url, model=settings.pollinations_model
    )
