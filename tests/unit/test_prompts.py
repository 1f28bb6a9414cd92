"""
Unit tests for the art visualization prompt builders
"""
import pytest

from artviz.services.art_catalog import describe_art
from artviz.services.prompts import SYNTHESIZED_PROMPT_PREFIX, ArtPrompts


class TestSingleCallPrompt:
    """Tests for the image-edit prompt"""

    @pytest.mark.unit
    def test_embeds_art_description(self):
        description = describe_art("abstract_art")
        prompt = ArtPrompts.single_call(description)

        assert prompt.startswith(f"Using the provided image of a room, please add {description} to the wall.")

    @pytest.mark.unit
    def test_contains_compositional_requirements(self):
        prompt = ArtPrompts.single_call("a small etching").lower()

        assert "most prominent wall" in prompt
        assert "perspective and proportions" in prompt
        assert "lighting and shadows" in prompt
        assert "properly sized" in prompt
        assert "maintain all other elements of the room" in prompt
        assert "photorealistic" in prompt
        assert "interior design visualization" in prompt


class TestPipelinePrompts:
    """Tests for the analyze -> prompt prompts"""

    @pytest.mark.unit
    def test_room_analysis_asks_for_text_only(self):
        prompt = ArtPrompts.room_analysis()

        for topic in ("WALLS", "LIGHTING", "ROOM STYLE", "AVAILABLE WALL SPACE", "CAMERA PERSPECTIVE", "EXISTING DECOR"):
            assert topic in prompt
        assert "Do NOT generate an image" in prompt

    @pytest.mark.unit
    def test_prompt_synthesis_folds_in_analysis_and_art(self):
        analysis = "Sage green plaster walls, north-facing window on the left, eye-level camera."
        description = describe_art("canvas_print")

        prompt = ArtPrompts.prompt_synthesis(analysis, description)

        assert analysis in prompt
        assert description in prompt
        assert f'Begin with the exact words "{SYNTHESIZED_PROMPT_PREFIX}"' in prompt
        assert "single continuous paragraph" in prompt
        assert "camera angle" in prompt

    @pytest.mark.unit
    def test_builders_are_pure(self):
        assert ArtPrompts.room_analysis() == ArtPrompts.room_analysis()
        assert ArtPrompts.single_call("x") == ArtPrompts.single_call("x")
