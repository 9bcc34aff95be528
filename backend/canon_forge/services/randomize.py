"""Dice-button randomizers for characters, sets and composite actions.

Randomizing a character or set is the explicit user action that replaces its
seed, so both return a reseeded copy. Callers should discard the profile's
existing reference images afterwards.
"""
import random
from typing import Optional

from canon_forge.models.profile import (
    CharacterProfile,
    CompositeConfig,
    LocationType,
    SetProfile,
    reseed,
)

CHARACTER_NAMES = ["Silas Thorne", "Kora Vance", "Malachi Quinn", "Lyra Skye", "Dante Rios"]
CHARACTER_AGES = ["21", "28", "35", "42", "56"]
CHARACTER_BUILDS = ["Lithe & Graceful", "Broad & Athletic", "Wiry & Powerful", "Compact & Agile"]
CHARACTER_EYES = ["Glowing Indigo", "Cybernetic Emerald", "Deep Obsidian", "Mismatched Amber"]
CHARACTER_HAIR = ["Braided coils", "Silver-white fade", "Neon blue undercut", "Long flowing black"]
CHARACTER_SKIN_TONES = ["Pale ivory", "Deep mahogany", "Warm olive", "Rich bronze"]
CHARACTER_FEATURES = [
    "Faint neck tattoo",
    "Mechanical right eye",
    "Surgical scar on temple",
    "Clockwork left hand",
]
CHARACTER_PERSONALITY = "Stoic wanderer with a sense of purpose."

SET_NAMES: dict[LocationType, list[str]] = {
    LocationType.indoor: [
        "Neon Cyber-Cafe",
        "Subterranean Shrine",
        "Luxury Sky-Loft",
        "Derelict Laboratory",
        "Alien Spaceship Bridge",
        "High-Tech Monastery",
    ],
    LocationType.outdoor: [
        "Floating Rain-District",
        "Abandoned Sprawl-Park",
        "Ritual Rooftop",
        "Monolithic Overpass",
        "Magma-Side Industrial Outpost",
    ],
}
SET_LIGHTING = [
    "Cold cyan fluorescents with warm back-glow",
    "Natural filtered moonlight through smog",
    "Dashing strobe pulses of amber",
    "Eternal dusk soft indigo wash",
    "Bioluminescent pulsing organic light",
]
SET_AMBIANCE = [
    "Thrumming industrial silence",
    "Hushed spiritual reverence",
    "Chaotic urban bustle",
    "Melancholic solitude",
    "Tense high-tech hum",
]
SET_STYLE = "Urban Spiritual Realism"
SET_DETAILS = (
    "Rain-slicked surfaces, floating holographic talismans, intricate brutalist architecture."
)

COMPOSITE_ACTIONS = [
    "Actively piloting the ship while sitting in the captain's seat",
    "Meditating on a ritual rooftop as rain falls upwards",
    "Engaged in a tense negotiation with a shadowy figure",
    "Repairing a complex mechanical prosthetic in the glow of a neon sign",
    "Standing stoically while wind whips their cloak against a monolithic sky",
]
COMPOSITE_ACTORS = [
    "A hovering security drone",
    "Two hooded acolytes in the background",
    "A translucent holographic guide",
    "None",
]


def randomize_character(
    profile: CharacterProfile, rng: Optional[random.Random] = None
) -> CharacterProfile:
    """Return a reseeded copy with randomly picked appearance attributes.

    Gender, backstory and aesthetic are kept as they are.
    """
    rng = rng or random.Random()
    return reseed(profile).model_copy(
        update={
            "name": rng.choice(CHARACTER_NAMES),
            "age": rng.choice(CHARACTER_AGES),
            "build": rng.choice(CHARACTER_BUILDS),
            "eyes": rng.choice(CHARACTER_EYES),
            "hair": rng.choice(CHARACTER_HAIR),
            "skin_tone": rng.choice(CHARACTER_SKIN_TONES),
            "distinctive_features": rng.choice(CHARACTER_FEATURES),
            "personality": CHARACTER_PERSONALITY,
        }
    )


def randomize_set(profile: SetProfile, rng: Optional[random.Random] = None) -> SetProfile:
    """Return a reseeded copy; the name is picked for the profile's location type."""
    rng = rng or random.Random()
    return reseed(profile).model_copy(
        update={
            "name": rng.choice(SET_NAMES[profile.location_type]),
            "lighting": rng.choice(SET_LIGHTING),
            "ambiance": rng.choice(SET_AMBIANCE),
            "style": SET_STYLE,
            "details": SET_DETAILS,
        }
    )


def randomize_composite(
    config: CompositeConfig, rng: Optional[random.Random] = None
) -> CompositeConfig:
    rng = rng or random.Random()
    return config.model_copy(
        update={
            "action": rng.choice(COMPOSITE_ACTIONS),
            "extra_actors": rng.choice(COMPOSITE_ACTORS),
        }
    )
