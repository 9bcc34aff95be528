"""HTTP request/response bodies for the forge API."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from canon_forge.models.profile import CharacterProfile, CompositeConfig, SetProfile
from canon_forge.services.templates import CharacterCategory, SetCategory


class CharacterImageRequest(BaseModel):
    """Body of POST /api/characters/images."""

    profile: CharacterProfile
    category: CharacterCategory


class SetImageRequest(BaseModel):
    """Body of POST /api/sets/images."""

    profile: SetProfile
    category: SetCategory


class CompositeImageRequest(BaseModel):
    """Body of POST /api/composites/images. `set` is the JSON key for the environment."""

    model_config = ConfigDict(populate_by_name=True)

    character: CharacterProfile
    set_profile: SetProfile = Field(..., alias="set")
    config: CompositeConfig = Field(default_factory=CompositeConfig)


class CharacterCollection(BaseModel):
    """Saved characters plus whether the last save succeeded."""

    saved: bool = True
    profiles: list[CharacterProfile] = Field(default_factory=list)


class SetCollection(BaseModel):
    """Saved sets plus whether the last save succeeded."""

    saved: bool = True
    profiles: list[SetProfile] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    """`detail` payload for classified generation failures."""

    kind: str
    message: Optional[str] = None
