"""Character, set and reference-image data models."""
import random
import string
import time
from enum import Enum
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from canon_forge.models.generation import GenerationResult

MAX_SEED = 2_147_483_647

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """Return a short random base-36 identifier."""
    return "".join(random.choices(_ID_ALPHABET, k=13))


def generate_seed() -> int:
    """Return a fresh identity seed in [0, MAX_SEED)."""
    return int(random.random() * MAX_SEED)


class LocationType(str, Enum):
    """Whether a set is an interior or exterior location."""

    indoor = "Indoor"
    outdoor = "Outdoor"


class CharacterProfile(BaseModel):
    """A character description plus its identity seed.

    The seed is assigned once at creation and only replaced by an explicit
    randomize action. It anchors every image of this character, composites
    included.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    seed: int = Field(default_factory=generate_seed, ge=0, le=MAX_SEED)
    name: str = ""
    age: str = ""
    gender: str = "Non-binary"
    eyes: str = ""
    hair: str = ""
    build: str = ""
    skin_tone: str = Field("", alias="skinTone")
    distinctive_features: str = Field("", alias="distinctiveFeatures")
    personality: str = ""
    backstory: str = ""
    aesthetic: str = "Urban Spiritual Realism"


class SetProfile(BaseModel):
    """An environment description plus its seed."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    seed: int = Field(default_factory=generate_seed, ge=0, le=MAX_SEED)
    name: str = ""
    location_type: LocationType = Field(LocationType.indoor, alias="locationType")
    lighting: str = ""
    ambiance: str = ""
    style: str = ""
    details: str = ""


class CompositeConfig(BaseModel):
    """Per-request settings for placing a character inside a set. Never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    character_id: str = Field("", alias="characterId")
    set_id: str = Field("", alias="setId")
    action: str = ""
    extra_actors: str = Field("", alias="extraActors")
    composition_style: str = Field("", alias="compositionStyle")


class ReferenceImage(BaseModel):
    """A generated image together with the exact prompt that produced it."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    type: str
    url: str
    prompt_used: str = Field(..., alias="promptUsed")
    timestamp: int


ProfileT = TypeVar("ProfileT", CharacterProfile, SetProfile)


def new_character_profile() -> CharacterProfile:
    return CharacterProfile()


def new_set_profile() -> SetProfile:
    return SetProfile()


def reseed(profile: ProfileT, seed: Optional[int] = None) -> ProfileT:
    """Return a copy of a character or set profile with a new identity seed."""
    return profile.model_copy(update={"seed": generate_seed() if seed is None else seed})


def new_reference(category: str, result: GenerationResult) -> ReferenceImage:
    """Create an immutable ReferenceImage for a successful generation."""
    return ReferenceImage(
        id=generate_id(),
        type=category,
        url=result.url,
        prompt_used=result.prompt,
        timestamp=int(time.time() * 1000),
    )


def push_reference(
    refs: list[ReferenceImage], category: str, result: GenerationResult
) -> list[ReferenceImage]:
    """Return a new most-recent-first list with a reference for `result` in front.

    Args:
        refs: Existing references (left untouched).
        category: Category tag the image was generated for.
        result: Successful generation result.

    Returns:
        New list whose first element is the freshly created ReferenceImage.
    """
    return [new_reference(category, result), *refs]
