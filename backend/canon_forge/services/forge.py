"""ForgeService: compiles and dispatches one reference-image request."""
from typing import TYPE_CHECKING

from canon_forge.core.logging import setup_logging
from canon_forge.models.generation import CompiledPrompt, GenerationResult
from canon_forge.models.profile import CharacterProfile, CompositeConfig, SetProfile
from canon_forge.services.prompt import (
    compile_character_prompt,
    compile_composite_prompt,
    compile_set_prompt,
)
from canon_forge.services.templates import (
    COMPOSITE_CATEGORY,
    CharacterCategory,
    SetCategory,
)

if TYPE_CHECKING:
    from canon_forge.services.dispatch import GenerationDispatcher

logger = setup_logging("forge")


class ForgeService:
    """Entry point used by the API layer for the three request kinds.

    Each call takes its inputs by value and returns a fresh GenerationResult;
    storing it as a reference image is up to the caller. GenerationError from
    the dispatcher propagates unchanged.
    """

    def __init__(self, dispatcher: "GenerationDispatcher") -> None:
        self.dispatcher = dispatcher

    async def generate_character_image(
        self, profile: CharacterProfile, category: CharacterCategory | str
    ) -> GenerationResult:
        compiled = compile_character_prompt(profile, category)
        return await self._run(compiled, CharacterCategory(category).value)

    async def generate_set_image(
        self, profile: SetProfile, category: SetCategory | str
    ) -> GenerationResult:
        compiled = compile_set_prompt(profile, category)
        return await self._run(compiled, SetCategory(category).value)

    async def generate_composite_image(
        self, character: CharacterProfile, set_profile: SetProfile, config: CompositeConfig
    ) -> GenerationResult:
        """Place `character` in `set_profile`, seeded with the character's seed."""
        compiled = compile_composite_prompt(character, set_profile, config)
        return await self._run(compiled, COMPOSITE_CATEGORY)

    async def _run(self, compiled: CompiledPrompt, category: str) -> GenerationResult:
        logger.info(
            "generate: category=%s aspect_ratio=%s",
            category,
            compiled.aspect_ratio,
            extra={"category": category, "seed": compiled.seed},
        )
        return await self.dispatcher.dispatch_compiled(compiled)
