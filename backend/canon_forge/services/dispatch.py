"""Generation request dispatcher: seed and aspect-ratio normalization."""
import asyncio
import math
from typing import Optional, Union

from canon_forge.core.errors import ErrorKind, GenerationError
from canon_forge.core.logging import setup_logging
from canon_forge.models.generation import CompiledPrompt, GenerationResult
from canon_forge.models.profile import MAX_SEED
from canon_forge.services.providers.base import ImageProvider

logger = setup_logging("dispatch")

DEFAULT_ASPECT_RATIO = "16:9"

ASPECT_RATIO_DIMENSIONS: dict[str, tuple[int, int]] = {
    "1:1": (1024, 1024),
    "3:4": (768, 1024),
    "4:3": (1024, 768),
    "9:16": (576, 1024),
    "16:9": (1024, 576),
}


def normalize_seed(seed: Union[int, float]) -> int:
    """Map any finite number onto a valid provider seed in [0, MAX_SEED].

    abs(floor(seed)) reduced modulo MAX_SEED + 1. Values already in range are
    returned unchanged, so the mapping is idempotent.
    """
    return abs(math.floor(seed)) % (MAX_SEED + 1)


def resolve_dimensions(aspect_ratio: str) -> tuple[int, int]:
    """Return (width, height) for an aspect ratio; unknown ratios get 16:9."""
    return ASPECT_RATIO_DIMENSIONS.get(
        aspect_ratio, ASPECT_RATIO_DIMENSIONS[DEFAULT_ASPECT_RATIO]
    )


def aspect_ratio_for(width: int, height: int) -> str:
    """Reverse of resolve_dimensions for providers that take a ratio string."""
    for ratio, dims in ASPECT_RATIO_DIMENSIONS.items():
        if dims == (width, height):
            return ratio
    return DEFAULT_ASPECT_RATIO


class GenerationDispatcher:
    """Sends one normalized request to the single configured provider.

    One attempt per call. Any retry policy belongs to the caller.
    """

    def __init__(self, provider: ImageProvider, timeout: Optional[float] = None) -> None:
        self.provider = provider
        self.timeout = timeout

    async def dispatch(
        self, prompt: str, seed: Union[int, float], aspect_ratio: str = DEFAULT_ASPECT_RATIO
    ) -> GenerationResult:
        """Normalize inputs and invoke the provider once.

        Args:
            prompt: Compiled prompt text, forwarded verbatim.
            seed: Any finite number; normalized before sending.
            aspect_ratio: One of ASPECT_RATIO_DIMENSIONS (others fall back to 16:9).

        Returns:
            The provider's GenerationResult.

        Raises:
            GenerationError: Provider failures pass through unchanged;
                unclassified exceptions and timeouts become TRANSPORT.
        """
        safe_seed = normalize_seed(seed)
        width, height = resolve_dimensions(aspect_ratio)
        provider_name = getattr(self.provider, "name", type(self.provider).__name__)
        logger.info(
            "dispatch: provider=%s seed=%d size=%dx%d",
            provider_name,
            safe_seed,
            width,
            height,
            extra={"provider": provider_name, "seed": safe_seed, "prompt_length": len(prompt)},
        )

        try:
            call = self.provider.generate(prompt, safe_seed, width, height)
            if self.timeout is not None:
                return await asyncio.wait_for(call, timeout=self.timeout)
            return await call
        except GenerationError as exc:
            logger.warning(
                "Generation failed: %s",
                exc.kind.value,
                extra={"provider": provider_name, "error_kind": exc.kind.value},
            )
            raise
        except Exception as exc:
            if self.timeout is not None and isinstance(exc, asyncio.TimeoutError):
                logger.error(
                    "Generation timed out after %ss",
                    self.timeout,
                    extra={"provider": provider_name, "error_kind": ErrorKind.TRANSPORT.value},
                )
                raise GenerationError(
                    ErrorKind.TRANSPORT, f"Provider did not answer within {self.timeout}s"
                ) from exc
            logger.error(
                "Generation failed: %s: %s",
                type(exc).__name__,
                exc,
                extra={"provider": provider_name, "error_kind": ErrorKind.TRANSPORT.value},
            )
            raise GenerationError(ErrorKind.TRANSPORT, str(exc) or type(exc).__name__) from exc

    async def dispatch_compiled(self, compiled: CompiledPrompt) -> GenerationResult:
        return await self.dispatch(compiled.prompt, compiled.seed, compiled.aspect_ratio)
