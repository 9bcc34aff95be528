"""Provider adapter contract."""
from typing import Protocol

from canon_forge.models.generation import GenerationResult


class ImageProvider(Protocol):
    """A backing image-generation service.

    Implementations receive an already-normalized seed and pixel size, and
    return the exact prompt they were given alongside the image locator.
    Failures are raised as GenerationError.
    """

    name: str

    async def generate(
        self, prompt: str, seed: int, width: int, height: int
    ) -> GenerationResult:
        ...
