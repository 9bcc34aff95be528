"""Keyless public adapter backed by Pollinations."""
from urllib.parse import quote, urlencode

from canon_forge.models.generation import GenerationResult

DEFAULT_BASE_URL = "https://image.pollinations.ai/prompt"
DEFAULT_MODEL = "flux"

# Pollinations rejects overly long request paths.
MAX_PROMPT_LENGTH = 1500


class PollinationsImageProvider:
    """Builds a self-contained image locator without contacting the service.

    The image is rendered lazily when the locator is dereferenced by the
    consumer, so this adapter never reports a generation failure itself.
    """

    name = "pollinations"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, model: str = DEFAULT_MODEL) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model

    def build_url(self, prompt: str, seed: int, width: int, height: int) -> str:
        encoded_prompt = quote(prompt[:MAX_PROMPT_LENGTH], safe="")
        query = urlencode(
            {
                "seed": seed,
                "width": width,
                "height": height,
                "nologo": "true",
                "model": self.model,
            }
        )
        return f"{self.base_url}/{encoded_prompt}?{query}"

    async def generate(
        self, prompt: str, seed: int, width: int, height: int
    ) -> GenerationResult:
        return GenerationResult(url=self.build_url(prompt, seed, width, height), prompt=prompt)
