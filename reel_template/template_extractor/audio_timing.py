"""Audio timing: beat grid and music cues from an assumed tempo."""

import math

import numpy as np

from reel_template.template_extractor.schemas import AudioTiming, MusicCue

DEFAULT_TEMPO_BPM = 120.0

# (fraction of duration, cue kind)
MUSIC_CUE_LAYOUT: tuple[tuple[float, str], ...] = (
    (0.0, "intro"),
    (0.5, "buildup"),
    (0.8, "climax"),
)


def extract_audio_timing(
    duration_seconds: float,
    tempo_bpm: float = DEFAULT_TEMPO_BPM,
) -> AudioTiming:
    """Build an evenly spaced beat grid and the fixed music cues.

    No signal analysis is performed: beats are placed every ``60 / tempo_bpm``
    seconds from 0 up to (not including) the end of the reel.

    Args:
        duration_seconds: Total reel duration.
        tempo_bpm: Assumed tempo.

    Returns:
        AudioTiming with a strictly increasing beat grid.
    """
    beat_interval = 60.0 / tempo_bpm
    count = math.ceil(duration_seconds / beat_interval)
    beat_times = np.arange(count) * beat_interval

    beats = tuple(float(t) for t in beat_times if t < duration_seconds)
    music_cues = tuple(
        MusicCue(time_seconds=duration_seconds * ratio, kind=kind)
        for ratio, kind in MUSIC_CUE_LAYOUT
    )

    return AudioTiming(tempo_bpm=tempo_bpm, beats=beats, music_cues=music_cues)
