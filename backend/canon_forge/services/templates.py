"""Reference-image categories and their fixed prompt fragments."""
from enum import Enum


class CharacterCategory(str, Enum):
    """Character reference image kinds."""

    HEADSHOT = "HEADSHOT"
    BODY_REVERSE = "BODY_REVERSE"
    WARDROBE = "WARDROBE"
    ACTION = "ACTION"
    EXPRESSION = "EXPRESSION"
    NEUTRAL_SHEET = "NEUTRAL_SHEET"


class SetCategory(str, Enum):
    """Set reference image kinds."""

    WIDE = "WIDE"
    MEDIUM = "MEDIUM"
    POV = "POV"
    DETAIL = "DETAIL"
    PLAN = "PLAN"
    LIGHTING = "LIGHTING"


# Category tag stored on composite reference images.
COMPOSITE_CATEGORY = "COMPOSITE"

AESTHETIC_PROMPT_CORE = """
Primary aesthetic: Urban spiritual realism.
Visual Style: Indigo, cyan, ultramarine shadows with warm amber and fuchsia accents.
Lighting: Deep, painterly precision, subconscious mood, subtle specular reflections on surfaces, soft organic scattering.
Cinematography: 35mm prime equivalent, shallow depth of field with bokeh, slight film grain, high fidelity textures.
Mood: Serenity mixed with anticipation, cinematic lighting (5200K).
"""

CHARACTER_TEMPLATES: dict[CharacterCategory, str] = {
    CharacterCategory.HEADSHOT: (
        "Extreme close-up cinematic headshot, neutral expression, microscopic skin texture "
        "and iris detail, neutral studio background, soft key lighting, character focus."
    ),
    CharacterCategory.BODY_REVERSE: (
        "Full body anatomical character reference sheet showing 3 distinct poses side-by-side: "
        "Front view, 3/4 profile view, and strict Profile view. The character is wearing "
        "character-appropriate minimal athletic briefs to clearly define musculature, skeletal "
        "structure, and defining physical traits. Clinical but cinematic lighting, clean simple "
        "studio background, high-detail skin rendering."
    ),
    CharacterCategory.WARDROBE: (
        "Full body reference in iconic character wardrobe, urban spiritual style clothing, "
        "visible fabric textures (cotton, canvas), standing in a softly lit nocturnal street "
        "under overpass."
    ),
    CharacterCategory.ACTION: (
        "Action pose reference, character in mid-motion, cinematic dynamic energy, fluid "
        "handheld camera perspective, interacting with urban environment."
    ),
    CharacterCategory.EXPRESSION: (
        "Facial expression sheet showing range of 3 emotions: calm, determination, and subtle "
        "smile. Close-up portraits."
    ),
    CharacterCategory.NEUTRAL_SHEET: (
        "Professional character design sheet, neutral flat studio lighting, solid light grey "
        "background, no shadows, full body front view, high-fidelity details, clearly visible "
        "features and colors without cinematic bloom."
    ),
}

SET_TEMPLATES: dict[SetCategory, str] = {
    SetCategory.WIDE: (
        "Establishing wide-angle landscape shot of the environment, capturing the full scale "
        "and architecture, deep depth of field, atmospheric perspective."
    ),
    SetCategory.MEDIUM: (
        "Medium shot focusing on the primary acting area or central hub of the set, showing "
        "functional elements and spatial relationships."
    ),
    SetCategory.POV: (
        "Immersive point-of-view shot from the perspective of someone standing in the space, "
        "eye-level, capturing the immediate surroundings and tactile atmosphere."
    ),
    SetCategory.DETAIL: (
        "Macro detail shot focusing on specific textures, props, or unique environmental "
        "elements (e.g., moss on concrete, glowing circuitry, rain on glass)."
    ),
    SetCategory.PLAN: (
        "Top-down architectural plan view of the set, schematic-like but visually rich, "
        "showing layout and furniture/environmental placement."
    ),
    SetCategory.LIGHTING: (
        "Abstract lighting and ambiance study focusing purely on how light interacts with the "
        "space, emphasizing shadows, glows, and the color palette."
    ),
}


def character_template(category: CharacterCategory | str) -> str:
    """Return the scene fragment for a character category.

    Raises:
        ValueError: `category` is not a CharacterCategory member.
    """
    return CHARACTER_TEMPLATES[CharacterCategory(category)]


def set_template(category: SetCategory | str) -> str:
    """Return the composition fragment for a set category.

    Raises:
        ValueError: `category` is not a SetCategory member.
    """
    return SET_TEMPLATES[SetCategory(category)]
