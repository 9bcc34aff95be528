"""Forge API router: reference-image generation, saved profiles, randomizers."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from canon_forge.core.errors import ErrorKind, GenerationError
from canon_forge.models.profile import (
    CharacterProfile,
    CompositeConfig,
    ReferenceImage,
    SetProfile,
    new_reference,
)
from canon_forge.models.requests import (
    CharacterCollection,
    CharacterImageRequest,
    CompositeImageRequest,
    ErrorDetail,
    SetCollection,
    SetImageRequest,
)
from canon_forge.services.forge import ForgeService
from canon_forge.services.randomize import (
    randomize_character,
    randomize_composite,
    randomize_set,
)
from canon_forge.services.storage import ProfileStore
from canon_forge.services.templates import COMPOSITE_CATEGORY

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["forge"])

# AUTH_REQUIRED gets its own status so the client can start re-authentication
# instead of showing a generic error.
ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.AUTH_REQUIRED: 401,
    ErrorKind.SAFETY_BLOCKED: 422,
    ErrorKind.NO_RESULT: 502,
    ErrorKind.TRANSPORT: 503,
}


def get_forge_service(request: Request) -> ForgeService:
    """FastAPI dependency: retrieve ForgeService from app.state.

    Returns HTTP 503 if the service was not initialized at startup.
    """
    svc: ForgeService | None = getattr(request.app.state, "forge_service", None)
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Image provider unavailable. Service not initialized.",
        )
    return svc


def get_profile_store(request: Request) -> ProfileStore:
    store: ProfileStore | None = getattr(request.app.state, "profile_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Profile store not initialized.")
    return store


def _http_error(exc: GenerationError) -> HTTPException:
    status_code = ERROR_STATUS.get(exc.kind, 503)
    logger.warning(
        "Generation request failed: %s -> HTTP %d",
        exc.kind.value,
        status_code,
        extra={"error_kind": exc.kind.value},
    )
    detail = ErrorDetail(kind=exc.kind.value, message=exc.message)
    return HTTPException(
        status_code=status_code,
        detail=detail.model_dump(),
    )


@router.post("/characters/images", response_model=ReferenceImage)
async def generate_character_image(
    body: CharacterImageRequest,
    service: ForgeService = Depends(get_forge_service),
) -> ReferenceImage:
    """Generate one character reference image.

    Raises:
        HTTPException 401: Provider credential rejected (kind AUTH_REQUIRED).
        HTTPException 422: Blocked by safety filters, or invalid body.
        HTTPException 502/503: No image returned / provider unreachable.
    """
    try:
        result = await service.generate_character_image(body.profile, body.category)
    except GenerationError as exc:
        raise _http_error(exc) from exc
    return new_reference(body.category.value, result)


@router.post("/sets/images", response_model=ReferenceImage)
async def generate_set_image(
    body: SetImageRequest,
    service: ForgeService = Depends(get_forge_service),
) -> ReferenceImage:
    try:
        result = await service.generate_set_image(body.profile, body.category)
    except GenerationError as exc:
        raise _http_error(exc) from exc
    return new_reference(body.category.value, result)


@router.post("/composites/images", response_model=ReferenceImage)
async def generate_composite_image(
    body: CompositeImageRequest,
    service: ForgeService = Depends(get_forge_service),
) -> ReferenceImage:
    """Place the character inside the set. Seeded with the character's seed."""
    try:
        result = await service.generate_composite_image(
            body.character, body.set_profile, body.config
        )
    except GenerationError as exc:
        raise _http_error(exc) from exc
    return new_reference(COMPOSITE_CATEGORY, result)


@router.get("/characters", response_model=CharacterCollection)
async def list_characters(store: ProfileStore = Depends(get_profile_store)) -> CharacterCollection:
    return CharacterCollection(profiles=store.load_characters())


@router.put("/characters", response_model=CharacterCollection)
async def save_character(
    profile: CharacterProfile,
    store: ProfileStore = Depends(get_profile_store),
) -> CharacterCollection:
    """Upsert a character. A failed save is reported as `saved: false`, not an error."""
    saved, profiles = store.upsert_character(profile)
    return CharacterCollection(saved=saved, profiles=profiles)


@router.get("/sets", response_model=SetCollection)
async def list_sets(store: ProfileStore = Depends(get_profile_store)) -> SetCollection:
    return SetCollection(profiles=store.load_sets())


@router.put("/sets", response_model=SetCollection)
async def save_set(
    profile: SetProfile,
    store: ProfileStore = Depends(get_profile_store),
) -> SetCollection:
    saved, profiles = store.upsert_set(profile)
    return SetCollection(saved=saved, profiles=profiles)


@router.post("/characters/randomize", response_model=CharacterProfile)
async def randomize_character_profile(profile: CharacterProfile) -> CharacterProfile:
    return randomize_character(profile)


@router.post("/sets/randomize", response_model=SetProfile)
async def randomize_set_profile(profile: SetProfile) -> SetProfile:
    return randomize_set(profile)


@router.post("/composites/randomize", response_model=CompositeConfig)
async def randomize_composite_config(config: CompositeConfig) -> CompositeConfig:
    return randomize_composite(config)
