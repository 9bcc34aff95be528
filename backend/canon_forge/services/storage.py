"""JSON-file profile store with the never-throw semantics of a browser key-value store."""
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from canon_forge.core.errors import ErrorKind
from canon_forge.core.logging import setup_logging
from canon_forge.models.profile import CharacterProfile, ProfileT, SetProfile

logger = setup_logging("storage")

CHARACTERS_KEY = "saved_chars"
SETS_KEY = "saved_sets"


class ProfileStore:
    """Two independently keyed collections: characters and sets.

    Loads return an empty list on missing or corrupt data. Saves return False
    instead of raising so an editing session is never interrupted by a
    persistence failure.
    """

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else Path("data")

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _load(self, key: str, model: type[ProfileT]) -> list[ProfileT]:
        path = self._path(key)
        if not path.exists():
            return []
        try:
            return TypeAdapter(list[model]).validate_json(path.read_bytes())
        except (OSError, ValidationError, ValueError) as exc:
            logger.error(
                "Failed to load %s: %s: %s",
                key,
                type(exc).__name__,
                exc,
                extra={"error_type": type(exc).__name__},
            )
            return []

    def _save(self, key: str, model: type[ProfileT], profiles: list[ProfileT]) -> bool:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            payload = TypeAdapter(list[model]).dump_json(profiles, by_alias=True, indent=2)
            path.write_bytes(payload)
        except OSError as exc:
            logger.error(
                "Failed to save %s: %s: %s",
                key,
                type(exc).__name__,
                exc,
                extra={
                    "error_type": type(exc).__name__,
                    "error_kind": ErrorKind.STORAGE_FAILURE.value,
                },
            )
            return False
        return True

    def _upsert(
        self, key: str, model: type[ProfileT], profile: ProfileT
    ) -> tuple[bool, list[ProfileT]]:
        current = self._load(key, model)
        updated = [p for p in current if p.id != profile.id] + [profile]
        if not self._save(key, model, updated):
            return False, current
        return True, updated

    def load_characters(self) -> list[CharacterProfile]:
        return self._load(CHARACTERS_KEY, CharacterProfile)

    def load_sets(self) -> list[SetProfile]:
        return self._load(SETS_KEY, SetProfile)

    def save_characters(self, characters: list[CharacterProfile]) -> bool:
        return self._save(CHARACTERS_KEY, CharacterProfile, characters)

    def save_sets(self, sets: list[SetProfile]) -> bool:
        return self._save(SETS_KEY, SetProfile, sets)

    def upsert_character(self, profile: CharacterProfile) -> tuple[bool, list[CharacterProfile]]:
        """Replace any saved character with the same id and append `profile`.

        Returns:
            (ok, collection). On failure the collection is the one still on disk.
        """
        return self._upsert(CHARACTERS_KEY, CharacterProfile, profile)

    def upsert_set(self, profile: SetProfile) -> tuple[bool, list[SetProfile]]:
        return self._upsert(SETS_KEY, SetProfile, profile)

    def find_character(self, profile_id: str) -> Optional[CharacterProfile]:
        return next((p for p in self.load_characters() if p.id == profile_id), None)

    def find_set(self, profile_id: str) -> Optional[SetProfile]:
        return next((p for p in self.load_sets() if p.id == profile_id), None)

