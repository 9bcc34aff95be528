"""Shared test fixtures and configuration."""
import pytest

from canon_forge.core.config import get_settings
from canon_forge.models.profile import CharacterProfile, SetProfile


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Pin provider settings so a developer's .env never leaks into tests."""
    monkeypatch.setenv("IMAGE_PROVIDER", "pollinations")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("GENERATION_TIMEOUT_SECONDS", raising=False)
    get_settings.cache_clear()


@pytest.fixture
def character() -> CharacterProfile:
    return CharacterProfile(
        id="char-001",
        seed=42,
        name="Kora Vance",
        age="28",
        gender="Female",
        eyes="Glowing Indigo",
        hair="Neon blue undercut",
        build="Wiry & Powerful",
        skin_tone="Warm olive",
        distinctive_features="Mechanical right eye",
        personality="Stoic wanderer",
        backstory="Raised in the rain districts",
    )


@pytest.fixture
def set_profile() -> SetProfile:
    return SetProfile(
        id="set-001",
        seed=999,
        name="Alien Spaceship Bridge",
        lighting="Cold cyan fluorescents with warm back-glow",
        ambiance="Tense high-tech hum",
        style="Urban Spiritual Realism",
        details="Holographic star charts over brushed steel consoles",
    )
