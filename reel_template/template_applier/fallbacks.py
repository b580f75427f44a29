"""Fallback instruction set used when the template cannot be adapted."""

from reel_template.template_applier.schemas import EditingInstruction
from reel_template.template_extractor.schemas import ReelTemplate

PLACEHOLDER_ACTION = "placeholder"


def placeholder_instructions(template: ReelTemplate) -> list[EditingInstruction]:
    """Reproduce the template's scene boundaries with no content attached."""
    return [
        EditingInstruction(
            timestamp_seconds=scene.start_seconds,
            action=PLACEHOLDER_ACTION,
            parameters={
                "scene_index": scene.index,
                "kind": str(scene.kind),
                "start_seconds": scene.start_seconds,
                "end_seconds": scene.end_seconds,
                "description": scene.description,
            },
        )
        for scene in template.scenes
    ]
