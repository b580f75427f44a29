"""Transition detector: fixed-interval cut points.

This is a timing heuristic, not shot detection. It assumes fast-paced
short-form content cuts roughly every few seconds.
"""

import math

import numpy as np

from reel_template.template_extractor.schemas import Transition, TransitionKind

TRANSITION_INTERVAL_SECONDS = 4.0
DEFAULT_CUT_STYLE = "hard"


def detect_transitions(
    duration_seconds: float,
    interval_seconds: float = TRANSITION_INTERVAL_SECONDS,
) -> list[Transition]:
    """Emit a hard cut at every multiple of the interval before the end.

    Args:
        duration_seconds: Total reel duration.
        interval_seconds: Spacing between cuts.

    Returns:
        Cuts sorted by time; empty when the reel is not longer than one interval.
    """
    count = math.ceil(duration_seconds / interval_seconds)
    cut_times = np.arange(1, max(count, 1)) * interval_seconds

    return [
        Transition(at_seconds=float(t), kind=TransitionKind.CUT, style=DEFAULT_CUT_STYLE)
        for t in cut_times
        if t < duration_seconds
    ]
