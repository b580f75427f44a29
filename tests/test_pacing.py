"""Tests for pacing classification."""
import pytest

from reel_template.template_extractor.pacing import classify_pacing
from reel_template.template_extractor.schemas import Pacing


@pytest.mark.parametrize(
    "scene_count, duration, expected",
    [
        (10, 30.0, Pacing.FAST),    # 0.333 scenes/s
        (6, 30.0, Pacing.MEDIUM),   # 0.2
        (4, 30.0, Pacing.SLOW),     # 0.133
        (9, 30.0, Pacing.MEDIUM),   # exactly 0.3 is not fast
        (3, 20.0, Pacing.SLOW),     # exactly 0.15 is not medium
        (2, 60.0, Pacing.SLOW),
    ],
)
def test_classify_pacing(scene_count, duration, expected):
    assert classify_pacing(scene_count, duration) == expected


@pytest.mark.parametrize("duration", [0.0, -5.0])
def test_non_positive_duration_is_slow(duration):
    assert classify_pacing(3, duration) == Pacing.SLOW
