"""Prompt compiler: turns profiles into deterministic generation requests.

Identity continuity across independent generations relies on two things only:
the character's literal attributes repeated verbatim in every prompt, and the
character's seed reused for every image of that character, composites
included. A set's own seed is never used for a composite.

All functions here are pure. Empty attributes are interpolated as empty text;
completeness checks belong to the form layer.
"""
from canon_forge.models.generation import CompiledPrompt
from canon_forge.models.profile import CharacterProfile, CompositeConfig, SetProfile
from canon_forge.services.templates import (
    AESTHETIC_PROMPT_CORE,
    CharacterCategory,
    SetCategory,
    character_template,
    set_template,
)

PORTRAIT_ASPECT_RATIO = "3:4"
LANDSCAPE_ASPECT_RATIO = "16:9"

DEFAULT_COMPOSITION_STYLE = "High-fidelity cinematic shot"
NO_EXTRA_ACTORS = "None"


def _identity(char: CharacterProfile) -> str:
    return (
        f"{char.name}, {char.age}y/o {char.gender}, {char.build} build, "
        f"{char.skin_tone} skin, {char.eyes} eyes, {char.hair} hair. "
        f"{char.distinctive_features}."
    )


def _location(set_profile: SetProfile) -> str:
    return set_profile.location_type.value


def compile_character_prompt(
    profile: CharacterProfile, category: CharacterCategory | str
) -> CompiledPrompt:
    """Compile a character reference request.

    Args:
        profile: Character to depict.
        category: Reference category; BODY_REVERSE renders portrait (3:4),
            everything else landscape (16:9).

    Returns:
        CompiledPrompt carrying the prompt text, the character's seed and the
        aspect ratio.
    """
    scene = character_template(category)
    prompt = (
        f"{AESTHETIC_PROMPT_CORE}\n"
        f"Subject: Character {_identity(profile)}\n"
        f"Scene: {scene}\n"
        "Style: High-fidelity cinematic photography. "
        "Strict facial and anatomical consistency."
    ).strip()
    aspect_ratio = (
        PORTRAIT_ASPECT_RATIO
        if CharacterCategory(category) is CharacterCategory.BODY_REVERSE
        else LANDSCAPE_ASPECT_RATIO
    )
    return CompiledPrompt(prompt=prompt, seed=profile.seed, aspect_ratio=aspect_ratio)


def compile_set_prompt(profile: SetProfile, category: SetCategory | str) -> CompiledPrompt:
    """Compile a set reference request. Always landscape."""
    composition = set_template(category)
    prompt = (
        f"{AESTHETIC_PROMPT_CORE}\n"
        f"Environment: {profile.name}, a {_location(profile)} location.\n"
        f"Aesthetic: {profile.style}. Ambiance: {profile.ambiance}.\n"
        f"Lighting Specs: {profile.lighting}. Details: {profile.details}.\n"
        f"Composition: {composition}\n"
        "Style: High-fidelity architectural photography."
    ).strip()
    return CompiledPrompt(prompt=prompt, seed=profile.seed, aspect_ratio=LANDSCAPE_ASPECT_RATIO)


def compile_composite_prompt(
    character: CharacterProfile, set_profile: SetProfile, config: CompositeConfig
) -> CompiledPrompt:
    """Compile a request placing `character` inside `set_profile`.

    The identity clause is marked mandatory and the character's seed is used
    as the generation seed, whatever the set's seed is.

    Args:
        character: Character whose identity must be preserved.
        set_profile: Environment the character is placed in.
        config: Action, extra actors and composition style for this shot.

    Returns:
        Landscape CompiledPrompt seeded with `character.seed`.
    """
    extra_actors = config.extra_actors if config.extra_actors.strip() else NO_EXTRA_ACTORS
    style = (
        config.composition_style
        if config.composition_style.strip()
        else DEFAULT_COMPOSITION_STYLE
    )
    prompt = (
        f"{AESTHETIC_PROMPT_CORE}\n"
        "Scene Composition: Merge Character and Environment seamlessly.\n"
        f"Character Visual Identity (MANDATORY): {_identity(character)}\n"
        "Note: The face must match exactly with the character's core facial traits.\n"
        "\n"
        f"Environment Context: {set_profile.name}, {_location(set_profile)}, "
        f"style {set_profile.style}, {set_profile.lighting} lighting. {set_profile.details}.\n"
        "\n"
        f"Action: {config.action}.\n"
        f"Additional Details/Actors: {extra_actors}.\n"
        "\n"
        "Integration Logic: Place the character physically in the environment. "
        f"Match local lighting, shadows, and color bounce from the {set_profile.lighting}.\n"
        f"Atmospheric depth should match the {set_profile.ambiance}.\n"
        "\n"
        f"Style: {style}."
    ).strip()
    return CompiledPrompt(
        prompt=prompt, seed=character.seed, aspect_ratio=LANDSCAPE_ASPECT_RATIO
    )
