"""Documented fallback values for every degradable extraction stage.

Each analyzer returns one of these when the reasoning service fails or its
response is unusable. Tests assert against these values directly.
"""

from reel_template.template_extractor.schemas import (
    Scene,
    SceneKind,
    TextOverlay,
    VisualStyle,
)

FALLBACK_HOOK_END_SECONDS = 3.0
FALLBACK_CTA_START_RATIO = 0.7

NEUTRAL_VISUAL_STYLE = VisualStyle(color_grading="natural", effects=(), filters=())

EMPTY_TEXT_OVERLAYS: tuple[TextOverlay, ...] = ()


def fallback_scenes(duration_seconds: float) -> list[Scene]:
    """Build the fixed hook / buildup / cta skeleton for a duration.

    Boundaries are clamped so they stay monotonic for reels shorter than the
    hook; segments that collapse to zero length are left out.

    Args:
        duration_seconds: Total reel duration.

    Returns:
        One to three contiguous scenes covering ``[0, duration_seconds]``.
    """
    hook_end = min(FALLBACK_HOOK_END_SECONDS, duration_seconds)
    cta_start = max(hook_end, duration_seconds * FALLBACK_CTA_START_RATIO)

    segments = [
        (SceneKind.HOOK, 0.0, hook_end, "Opening hook"),
        (SceneKind.BUILDUP, hook_end, cta_start, "Main content"),
        (SceneKind.CTA, cta_start, duration_seconds, "Call to action"),
    ]

    scenes: list[Scene] = []
    for kind, start, end, description in segments:
        if end > start:
            scenes.append(
                Scene(
                    index=len(scenes) + 1,
                    start_seconds=start,
                    end_seconds=end,
                    kind=kind,
                    description=description,
                )
            )
    return scenes
