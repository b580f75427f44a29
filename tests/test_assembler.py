"""Tests for template assembly and the template invariants."""
import pytest
from pydantic import ValidationError

from reel_template.template_extractor.assembler import (
    assemble_template,
    default_template_name,
)
from reel_template.template_extractor.audio_timing import extract_audio_timing
from reel_template.template_extractor.fallbacks import NEUTRAL_VISUAL_STYLE, fallback_scenes
from reel_template.template_extractor.schemas import (
    AudioTiming,
    OverlayPosition,
    Pacing,
    ReelTemplate,
    Scene,
    SceneKind,
    TextOverlay,
    Transition,
    TransitionKind,
)
from reel_template.template_extractor.transition_detector import detect_transitions


# =============================================================================
# Test Fixtures
# =============================================================================

def _scene(index, start, end, kind=SceneKind.OTHER):
    return Scene(index=index, start_seconds=start, end_seconds=end, kind=kind)


def _cut(at):
    return Transition(at_seconds=at, kind=TransitionKind.CUT, style="hard")


def _caption(start, end, text="TEXT"):
    return TextOverlay(
        start_seconds=start,
        end_seconds=end,
        text=text,
        position=OverlayPosition.CENTER,
    )


@pytest.fixture
def stage_outputs():
    """Stage outputs for a 30 second reel, deliberately out of order."""
    return {
        "source_ref": "https://example.com/reels/abc123.mp4",
        "duration_seconds": 30.0,
        "scenes": [
            _scene(2, 10.0, 25.0, SceneKind.CLIMAX),
            _scene(1, 0.0, 8.0, SceneKind.HOOK),
            _scene(3, 26.0, 30.0, SceneKind.CTA),
        ],
        "transitions": [_cut(8.0), _cut(4.0), _cut(8.0), _cut(31.0)],
        "audio_timing": extract_audio_timing(30.0),
        "visual_style": NEUTRAL_VISUAL_STYLE,
        "text_overlays": [_caption(20.0, 22.0, "LATER"), _caption(2.0, 4.0, "FIRST")],
    }


# =============================================================================
# Scenes
# =============================================================================

def test_scenes_tile_the_whole_duration(stage_outputs):
    template = assemble_template(**stage_outputs)

    spans = [(s.index, s.kind, s.start_seconds, s.end_seconds) for s in template.scenes]
    assert spans == [
        (1, SceneKind.HOOK, 0.0, 10.0),
        (2, SceneKind.CLIMAX, 10.0, 26.0),
        (3, SceneKind.CTA, 26.0, 30.0),
    ]


def test_overlapping_and_out_of_range_scenes_are_trimmed(stage_outputs):
    stage_outputs["scenes"] = [
        _scene(1, 2.0, 12.0, SceneKind.HOOK),
        _scene(2, 5.0, 11.0),        # fully inside the previous scene
        _scene(3, 9.0, 50.0, SceneKind.CTA),
    ]

    template = assemble_template(**stage_outputs)

    spans = [(s.index, s.kind, s.start_seconds, s.end_seconds) for s in template.scenes]
    assert spans == [
        (1, SceneKind.HOOK, 0.0, 12.0),
        (2, SceneKind.CTA, 12.0, 30.0),
    ]


def test_pacing_counts_scenes_kept_after_trimming(stage_outputs):
    # Ten suggestions over a 30s reel read as fast, but they all overlap
    stage_outputs["scenes"] = [_scene(i, 0.0, 30.0) for i in range(1, 11)]

    template = assemble_template(**stage_outputs)

    assert len(template.scenes) == 1
    assert template.pacing == Pacing.SLOW


def test_no_usable_scenes_falls_back_to_skeleton(stage_outputs):
    stage_outputs["scenes"] = [_scene(1, 40.0, 45.0)]

    template = assemble_template(**stage_outputs)

    assert list(template.scenes) == fallback_scenes(30.0)


def test_fallback_scenes_assemble_with_exact_boundaries(stage_outputs):
    stage_outputs["scenes"] = fallback_scenes(30.0)

    template = assemble_template(**stage_outputs)

    assert template.scenes[0].start_seconds == 0.0
    assert template.scenes[-1].end_seconds == 30.0
    assert [s.kind for s in template.scenes] == [
        SceneKind.HOOK,
        SceneKind.BUILDUP,
        SceneKind.CTA,
    ]


# =============================================================================
# Sortedness
# =============================================================================

def test_transitions_sorted_unique_and_in_range(stage_outputs):
    template = assemble_template(**stage_outputs)

    assert [t.at_seconds for t in template.transitions] == [4.0, 8.0]


def test_beats_sorted_and_in_range(stage_outputs):
    stage_outputs["audio_timing"] = AudioTiming(
        tempo_bpm=120.0,
        beats=(1.0, 0.5, 1.0, 31.0),
    )

    template = assemble_template(**stage_outputs)

    assert template.audio_timing.beats == (0.5, 1.0)


def test_overlays_sorted_and_clamped(stage_outputs):
    stage_outputs["text_overlays"] = [
        _caption(25.0, 40.0, "END"),
        _caption(2.0, 4.0, "START"),
        _caption(35.0, 38.0, "GONE"),
    ]

    template = assemble_template(**stage_outputs)

    assert [(o.text, o.start_seconds, o.end_seconds) for o in template.text_overlays] == [
        ("START", 2.0, 4.0),
        ("END", 25.0, 30.0),
    ]


# =============================================================================
# Naming & idempotence
# =============================================================================

def test_assembly_is_idempotent(stage_outputs):
    first = assemble_template(**stage_outputs)
    second = assemble_template(**stage_outputs)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_default_name_is_deterministic(stage_outputs):
    template = assemble_template(**stage_outputs)

    assert template.name == default_template_name(stage_outputs["source_ref"])
    assert template.name.startswith("Reel Template - abc123.mp4 (")


def test_name_override(stage_outputs):
    template = assemble_template(**stage_outputs, name="Gym promo")
    assert template.name == "Gym promo"


# =============================================================================
# Template model
# =============================================================================

def test_template_is_immutable(stage_outputs):
    template = assemble_template(**stage_outputs)

    with pytest.raises(ValidationError):
        template.pacing = Pacing.FAST


def test_template_survives_json_storage(stage_outputs):
    template = assemble_template(**stage_outputs)

    restored = ReelTemplate.model_validate_json(template.model_dump_json())

    assert restored == template


def test_template_rejects_gapped_scenes(stage_outputs):
    template = assemble_template(**stage_outputs)
    data = template.model_dump()
    data["scenes"][1]["start_seconds"] = 11.0

    with pytest.raises(ValidationError):
        ReelTemplate.model_validate(data)


def test_default_transition_grid_passes_validation():
    duration = 60.0
    template = assemble_template(
        source_ref="reel.mp4",
        duration_seconds=duration,
        scenes=fallback_scenes(duration),
        transitions=detect_transitions(duration),
        audio_timing=extract_audio_timing(duration),
        visual_style=NEUTRAL_VISUAL_STYLE,
        text_overlays=[],
    )

    assert len(template.transitions) == 14
    assert len(template.audio_timing.beats) == 120
