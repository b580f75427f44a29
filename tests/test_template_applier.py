"""Tests for applying a template to new content."""
import pytest

from fakes import FakeReasoningClient
from reel_template.common.errors import ApplyError
from reel_template.reasoning import ReasoningError
from reel_template.template_applier.fallbacks import PLACEHOLDER_ACTION
from reel_template.template_applier.schemas import (
    EditingInstructionsResponse,
    InstructionSuggestion,
)
from reel_template.template_applier.service import TemplateApplierService
from reel_template.template_extractor.assembler import assemble_template
from reel_template.template_extractor.audio_timing import extract_audio_timing
from reel_template.template_extractor.fallbacks import NEUTRAL_VISUAL_STYLE, fallback_scenes
from reel_template.template_extractor.schemas import (
    OverlayPosition,
    TextOverlay,
)
from reel_template.template_extractor.transition_detector import detect_transitions


@pytest.fixture
def template():
    return assemble_template(
        source_ref="reels/original.mp4",
        duration_seconds=30.0,
        scenes=fallback_scenes(30.0),
        transitions=detect_transitions(30.0),
        audio_timing=extract_audio_timing(30.0),
        visual_style=NEUTRAL_VISUAL_STYLE,
        text_overlays=[
            TextOverlay(
                start_seconds=25.0,
                end_seconds=28.0,
                text="FOLLOW FOR MORE",
                position=OverlayPosition.BOTTOM,
            )
        ],
    )


ASSETS = ["s3://bucket/clip-a.mp4", "s3://bucket/clip-b.mp4"]


def _suggestion(timestamp, action, **parameters):
    return InstructionSuggestion(
        timestamp_seconds=timestamp,
        action=action,
        parameters=parameters,
    )


@pytest.mark.asyncio
async def test_instructions_are_sorted_and_clamped(template):
    response = EditingInstructionsResponse(
        editing_instructions=[
            _suggestion(21.0, "add_text", text="Link in bio"),
            _suggestion(0.0, "place_clip", asset_index=0),
            _suggestion(3.0, "place_clip", asset_index=1),
            _suggestion(-2.0, "set_color_grade", grade="natural"),
            _suggestion(45.0, "fade_out"),
            _suggestion(10.0, "  "),
        ]
    )
    reasoning = FakeReasoningClient({EditingInstructionsResponse: response})

    instructions = await TemplateApplierService(reasoning).apply(
        template, "New product launch", ASSETS
    )

    assert [(i.timestamp_seconds, i.action) for i in instructions] == [
        (0.0, "place_clip"),
        (0.0, "set_color_grade"),
        (3.0, "place_clip"),
        (21.0, "add_text"),
        (30.0, "fade_out"),
    ]
    assert instructions[0].parameters == {"asset_index": 0}
    assert reasoning.calls[0]["strict_schema"] is False


@pytest.mark.asyncio
async def test_prompt_describes_template_and_assets(template):
    reasoning = FakeReasoningClient()

    await TemplateApplierService(reasoning).apply(template, "Try our new app", ASSETS)

    prompt = reasoning.calls[0]["user_prompt"]
    assert '"kind": "hook"' in prompt
    assert "Try our new app" in prompt
    assert "Available Assets (2 files)" in prompt
    assert "1. s3://bucket/clip-b.mp4" in prompt
    assert "FOLLOW FOR MORE" in prompt


@pytest.mark.asyncio
async def test_reasoning_failure_gives_placeholders(template):
    instructions = await TemplateApplierService(FakeReasoningClient()).apply(
        template, "script", ASSETS
    )

    assert [i.action for i in instructions] == [PLACEHOLDER_ACTION] * 3
    assert [i.timestamp_seconds for i in instructions] == [
        s.start_seconds for s in template.scenes
    ]
    assert [i.parameters["end_seconds"] for i in instructions] == [
        s.end_seconds for s in template.scenes
    ]
    assert instructions[0].parameters["kind"] == "hook"


@pytest.mark.asyncio
async def test_empty_response_gives_placeholders(template):
    response = EditingInstructionsResponse(editing_instructions=[])
    reasoning = FakeReasoningClient({EditingInstructionsResponse: response})

    instructions = await TemplateApplierService(reasoning).apply(template, "script", [])

    assert len(instructions) == len(template.scenes)
    assert all(i.action == PLACEHOLDER_ACTION for i in instructions)


@pytest.mark.asyncio
async def test_strict_mode_raises_apply_error(template):
    with pytest.raises(ApplyError) as exc_info:
        await TemplateApplierService(FakeReasoningClient()).apply(
            template, "script", ASSETS, strict=True
        )

    assert isinstance(exc_info.value.cause, ReasoningError)


@pytest.mark.asyncio
async def test_template_is_reusable(template):
    reasoning = FakeReasoningClient()
    applier = TemplateApplierService(reasoning)

    first = await applier.apply(template, "first script", ASSETS)
    second = await applier.apply(template, "second script", ASSETS[:1])

    assert first == second
    assert len(reasoning.calls) == 2
