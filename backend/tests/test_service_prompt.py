"""Tests for the prompt compiler."""
import pytest

from canon_forge.models.profile import CharacterProfile, CompositeConfig, SetProfile
from canon_forge.services.prompt import (
    compile_character_prompt,
    compile_composite_prompt,
    compile_set_prompt,
)
from canon_forge.services.templates import (
    AESTHETIC_PROMPT_CORE,
    CHARACTER_TEMPLATES,
    SET_TEMPLATES,
    CharacterCategory,
    SetCategory,
)

CORE = AESTHETIC_PROMPT_CORE.strip()


class TestCompileCharacterPrompt:
    """Tests for compile_character_prompt()."""

    def test_headshot_scenario(self, character: CharacterProfile) -> None:
        """Seed 42 HEADSHOT: aesthetic core present, seed 42, landscape."""
        compiled = compile_character_prompt(character, CharacterCategory.HEADSHOT)
        assert CORE in compiled.prompt
        assert compiled.seed == 42
        assert compiled.aspect_ratio == "16:9"

    def test_contains_category_fragment(self, character: CharacterProfile) -> None:
        compiled = compile_character_prompt(character, CharacterCategory.WARDROBE)
        assert CHARACTER_TEMPLATES[CharacterCategory.WARDROBE] in compiled.prompt

    def test_subject_clause_interpolates_attributes(self, character: CharacterProfile) -> None:
        prompt = compile_character_prompt(character, CharacterCategory.ACTION).prompt
        assert (
            "Subject: Character Kora Vance, 28y/o Female, Wiry & Powerful build, "
            "Warm olive skin, Glowing Indigo eyes, Neon blue undercut hair. "
            "Mechanical right eye."
        ) in prompt

    def test_ends_with_consistency_directive(self, character: CharacterProfile) -> None:
        prompt = compile_character_prompt(character, CharacterCategory.EXPRESSION).prompt
        assert prompt.endswith("Strict facial and anatomical consistency.")

    @pytest.mark.parametrize("category", list(CharacterCategory))
    def test_aspect_ratio_portrait_only_for_body_reverse(
        self, character: CharacterProfile, category: CharacterCategory
    ) -> None:
        expected = "3:4" if category is CharacterCategory.BODY_REVERSE else "16:9"
        assert compile_character_prompt(character, category).aspect_ratio == expected

    def test_is_pure(self, character: CharacterProfile) -> None:
        first = compile_character_prompt(character, CharacterCategory.HEADSHOT)
        second = compile_character_prompt(character, CharacterCategory.HEADSHOT)
        assert first == second

    def test_string_category_accepted(self, character: CharacterProfile) -> None:
        assert compile_character_prompt(character, "BODY_REVERSE").aspect_ratio == "3:4"

    def test_empty_attributes_interpolated_as_empty_text(self) -> None:
        """Blank fields are neither omitted nor replaced with placeholders."""
        compiled = compile_character_prompt(CharacterProfile(seed=3), CharacterCategory.HEADSHOT)
        assert "Subject: Character , y/o Non-binary,  build,  skin,  eyes,  hair. ." in compiled.prompt

    def test_unknown_category_raises(self, character: CharacterProfile) -> None:
        with pytest.raises(ValueError):
            compile_character_prompt(character, "PASSPORT")

    def test_prompt_is_stripped(self, character: CharacterProfile) -> None:
        prompt = compile_character_prompt(character, CharacterCategory.HEADSHOT).prompt
        assert prompt == prompt.strip()


class TestCompileSetPrompt:
    """Tests for compile_set_prompt()."""

    @pytest.mark.parametrize("category", list(SetCategory))
    def test_always_landscape(self, set_profile: SetProfile, category: SetCategory) -> None:
        assert compile_set_prompt(set_profile, category).aspect_ratio == "16:9"

    def test_uses_set_seed(self, set_profile: SetProfile) -> None:
        assert compile_set_prompt(set_profile, SetCategory.WIDE).seed == 999

    def test_environment_clause(self, set_profile: SetProfile) -> None:
        prompt = compile_set_prompt(set_profile, SetCategory.POV).prompt
        assert CORE in prompt
        assert "Environment: Alien Spaceship Bridge, a Indoor location." in prompt
        assert "Ambiance: Tense high-tech hum." in prompt
        assert "Lighting Specs: Cold cyan fluorescents with warm back-glow." in prompt
        assert "Details: Holographic star charts over brushed steel consoles." in prompt
        assert SET_TEMPLATES[SetCategory.POV] in prompt

    def test_is_pure(self, set_profile: SetProfile) -> None:
        assert compile_set_prompt(set_profile, "DETAIL") == compile_set_prompt(set_profile, "DETAIL")


class TestCompileCompositePrompt:
    """Tests for compile_composite_prompt()."""

    def test_piloting_scenario(self, character: CharacterProfile, set_profile: SetProfile) -> None:
        """Character seed 7, set seed 999: the character's seed wins."""
        char = character.model_copy(update={"seed": 7})
        compiled = compile_composite_prompt(char, set_profile, CompositeConfig(action="Piloting"))
        assert compiled.seed == 7
        assert compiled.aspect_ratio == "16:9"
        assert "Action: Piloting." in compiled.prompt
        assert "Kora Vance" in compiled.prompt
        assert "Mechanical right eye" in compiled.prompt
        assert "Alien Spaceship Bridge" in compiled.prompt
        assert "Holographic star charts" in compiled.prompt

    def test_seed_never_taken_from_set(self, character: CharacterProfile) -> None:
        for set_seed in (0, 7, 999, 2_147_483_647):
            compiled = compile_composite_prompt(
                character, SetProfile(seed=set_seed), CompositeConfig()
            )
            assert compiled.seed == character.seed

    def test_identity_clause_is_mandatory(
        self, character: CharacterProfile, set_profile: SetProfile
    ) -> None:
        prompt = compile_composite_prompt(character, set_profile, CompositeConfig()).prompt
        assert "Character Visual Identity (MANDATORY): Kora Vance, 28y/o Female" in prompt
        assert "The face must match exactly" in prompt

    def test_blank_extra_actors_become_none(
        self, character: CharacterProfile, set_profile: SetProfile
    ) -> None:
        prompt = compile_composite_prompt(character, set_profile, CompositeConfig()).prompt
        assert "Additional Details/Actors: None." in prompt

    def test_whitespace_extra_actors_become_none(
        self, character: CharacterProfile, set_profile: SetProfile
    ) -> None:
        config = CompositeConfig(extra_actors="   ")
        prompt = compile_composite_prompt(character, set_profile, config).prompt
        assert "Additional Details/Actors: None." in prompt

    def test_extra_actors_kept(self, character: CharacterProfile, set_profile: SetProfile) -> None:
        config = CompositeConfig(extra_actors="A hovering security drone")
        prompt = compile_composite_prompt(character, set_profile, config).prompt
        assert "Additional Details/Actors: A hovering security drone." in prompt

    def test_blank_style_uses_default(
        self, character: CharacterProfile, set_profile: SetProfile
    ) -> None:
        prompt = compile_composite_prompt(character, set_profile, CompositeConfig()).prompt
        assert prompt.endswith("Style: High-fidelity cinematic shot.")

    def test_custom_style(self, character: CharacterProfile, set_profile: SetProfile) -> None:
        config = CompositeConfig(composition_style="Anamorphic noir still")
        prompt = compile_composite_prompt(character, set_profile, config).prompt
        assert "Style: Anamorphic noir still." in prompt
        assert "High-fidelity cinematic shot" not in prompt

    def test_integration_logic_uses_set_lighting_and_ambiance(
        self, character: CharacterProfile, set_profile: SetProfile
    ) -> None:
        prompt = compile_composite_prompt(character, set_profile, CompositeConfig()).prompt
        assert (
            "color bounce from the Cold cyan fluorescents with warm back-glow." in prompt
        )
        assert "Atmospheric depth should match the Tense high-tech hum." in prompt

    def test_is_pure(self, character: CharacterProfile, set_profile: SetProfile) -> None:
        config = CompositeConfig(action="Meditating")
        assert compile_composite_prompt(character, set_profile, config) == compile_composite_prompt(
            character, set_profile, config
        )
