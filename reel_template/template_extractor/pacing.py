"""Pacing classification from scene density."""

from reel_template.template_extractor.schemas import Pacing

# Scenes per second
FAST_DENSITY_THRESHOLD = 0.3
MEDIUM_DENSITY_THRESHOLD = 0.15


def classify_pacing(scene_count: int, duration_seconds: float) -> Pacing:
    """Classify how densely a reel is cut into scenes.

    More than one scene every ~3 seconds is fast, one every 3-7 seconds is
    medium, anything sparser is slow. A non-positive duration has no
    measurable density and is classified as slow.
    """
    if duration_seconds <= 0:
        return Pacing.SLOW

    density = scene_count / duration_seconds

    if density > FAST_DENSITY_THRESHOLD:
        return Pacing.FAST
    if density > MEDIUM_DENSITY_THRESHOLD:
        return Pacing.MEDIUM
    return Pacing.SLOW
