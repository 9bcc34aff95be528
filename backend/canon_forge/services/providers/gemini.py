"""Authenticated multimodal adapter backed by the Gemini image model."""
import base64
from typing import Any

from canon_forge.core.errors import ErrorKind, GenerationError
from canon_forge.core.logging import setup_logging
from canon_forge.models.generation import GenerationResult
from canon_forge.services.dispatch import aspect_ratio_for

logger = setup_logging("provider.gemini")

DEFAULT_MODEL = "gemini-3-pro-image-preview"
IMAGE_SIZE = "1K"

# Message fragment returned when the selected key/project cannot see the model.
ENTITY_NOT_FOUND = "Requested entity was not found"

# Finish reasons that mean the request or the image was blocked by a filter.
SAFETY_FINISH_REASONS = frozenset(
    {
        "SAFETY",
        "IMAGE_SAFETY",
        "PROHIBITED_CONTENT",
        "IMAGE_PROHIBITED_CONTENT",
        "BLOCKLIST",
        "SPII",
    }
)


class GeminiImageProvider:
    """Generates images through google-genai with an API key.

    Response handling:
    - no candidates -> NO_RESULT
    - first candidate finished with a safety or prohibited-content reason -> SAFETY_BLOCKED
    - no inline image part -> NO_RESULT
    - "entity not found" from the API (or no key at all) -> AUTH_REQUIRED
    - anything else raised by the client -> TRANSPORT
    """

    name = "gemini"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL) -> None:
        self.api_key = api_key
        self.model = model

    async def generate(
        self, prompt: str, seed: int, width: int, height: int
    ) -> GenerationResult:
        if not self.api_key:
            raise GenerationError(ErrorKind.AUTH_REQUIRED, "No API key configured")

        try:
            response = await self._call_image_api(prompt, seed, aspect_ratio_for(width, height))
        except Exception as exc:
            if ENTITY_NOT_FOUND in str(exc):
                logger.warning(
                    "Gemini rejected the credential",
                    extra={"provider": self.name, "error_kind": ErrorKind.AUTH_REQUIRED.value},
                )
                raise GenerationError(ErrorKind.AUTH_REQUIRED, str(exc)) from exc
            raise GenerationError(ErrorKind.TRANSPORT, str(exc)) from exc

        return GenerationResult(url=self._extract_data_uri(response), prompt=prompt)

    def _extract_data_uri(self, response: Any) -> str:
        """Return the first inline image of the first candidate as a data: URI."""
        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise GenerationError(ErrorKind.NO_RESULT, "Model produced no result.")

        candidate = candidates[0]
        finish_reason = getattr(candidate, "finish_reason", None)
        if getattr(finish_reason, "value", finish_reason) in SAFETY_FINISH_REASONS:
            raise GenerationError(ErrorKind.SAFETY_BLOCKED, "Blocked by safety filters.")

        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                data = inline.data
                if isinstance(data, (bytes, bytearray)):
                    data = base64.b64encode(data).decode("ascii")
                return f"data:{inline.mime_type};base64,{data}"

        raise GenerationError(ErrorKind.NO_RESULT, "No image data found.")

    async def _call_image_api(self, prompt: str, seed: int, aspect_ratio: str) -> Any:
        """Send one generate_content request and return the raw response.

        Args:
            prompt: Compiled prompt text.
            seed: Normalized seed.
            aspect_ratio: Ratio string understood by the image config.

        Returns:
            The google-genai GenerateContentResponse.
        """
        from google import genai  # type: ignore[import-untyped]
        from google.genai import types  # type: ignore[import-untyped]

        client = genai.Client(api_key=self.api_key)
        return await client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                seed=seed,
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(
                    aspect_ratio=aspect_ratio,
                    image_size=IMAGE_SIZE,
                ),
            ),
        )
