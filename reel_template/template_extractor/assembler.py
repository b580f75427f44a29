"""Template assembler: joins stage outputs into one validated template.

Analyzer output order is not guaranteed, so every timeline collection is
clamped to ``[0, duration]`` and sorted here before it is attached.
"""

import hashlib
from collections.abc import Iterable
from pathlib import PurePath

from reel_template.template_extractor.fallbacks import fallback_scenes
from reel_template.template_extractor.pacing import classify_pacing
from reel_template.template_extractor.schemas import (
    AudioTiming,
    MusicCue,
    ReelTemplate,
    Scene,
    TextOverlay,
    Transition,
    VisualStyle,
)


def default_template_name(source_ref: str) -> str:
    """Deterministic template name derived from the source reference."""
    digest = hashlib.sha256(source_ref.encode("utf-8")).hexdigest()[:8]
    label = PurePath(source_ref).name or source_ref or "untitled"
    return f"Reel Template - {label} ({digest})"


def assemble_template(
    *,
    source_ref: str,
    duration_seconds: float,
    scenes: Iterable[Scene],
    transitions: Iterable[Transition],
    audio_timing: AudioTiming,
    visual_style: VisualStyle,
    text_overlays: Iterable[TextOverlay],
    name: str | None = None,
) -> ReelTemplate:
    """Combine the stage results into an immutable template.

    Assembly is pure: the same inputs always produce an identical template.
    Pacing is classified from the normalized scenes, so it always matches
    the scenes stored on the template.

    Args:
        source_ref: Reference to the source reel (URL or path).
        duration_seconds: Total reel duration.
        scenes: Scenes from the structural analyzer.
        transitions: Transitions from the transition detector.
        audio_timing: Beat grid and cues.
        visual_style: Suggested visual style.
        text_overlays: Suggested captions.
        name: Optional template name; derived from ``source_ref`` if omitted.

    Returns:
        The assembled ReelTemplate.
    """
    normalized_scenes = _normalize_scenes(scenes, duration_seconds)
    return ReelTemplate(
        name=name or default_template_name(source_ref),
        source_ref=source_ref,
        duration_seconds=duration_seconds,
        scenes=normalized_scenes,
        transitions=_normalize_transitions(transitions, duration_seconds),
        audio_timing=_normalize_audio_timing(audio_timing, duration_seconds),
        visual_style=visual_style,
        text_overlays=_normalize_overlays(text_overlays, duration_seconds),
        pacing=classify_pacing(len(normalized_scenes), duration_seconds),
    )


def _normalize_scenes(scenes: Iterable[Scene], duration: float) -> tuple[Scene, ...]:
    """Clamp, de-overlap and pad scenes so they tile ``[0, duration]`` exactly."""
    spans: list[list] = []
    for scene in sorted(scenes, key=lambda s: (s.start_seconds, s.index)):
        start = min(max(scene.start_seconds, 0.0), duration)
        end = min(max(scene.end_seconds, 0.0), duration)
        if spans:
            start = max(start, spans[-1][1])
        if end <= start:
            continue
        spans.append([start, end, scene])

    if not spans:
        spans = [[s.start_seconds, s.end_seconds, s] for s in fallback_scenes(duration)]

    # Close gaps by extending each scene up to the next one
    spans[0][0] = 0.0
    for prev, nxt in zip(spans, spans[1:]):
        prev[1] = nxt[0]
    spans[-1][1] = duration

    return tuple(
        Scene(
            index=index,
            start_seconds=start,
            end_seconds=end,
            kind=scene.kind,
            description=scene.description,
        )
        for index, (start, end, scene) in enumerate(spans, start=1)
    )


def _normalize_transitions(
    transitions: Iterable[Transition],
    duration: float,
) -> tuple[Transition, ...]:
    """Sort transitions, dropping out-of-range and duplicate timestamps."""
    seen: set[float] = set()
    result: list[Transition] = []
    for transition in sorted(transitions, key=lambda t: t.at_seconds):
        if transition.at_seconds > duration or transition.at_seconds in seen:
            continue
        seen.add(transition.at_seconds)
        result.append(transition)
    return tuple(result)


def _normalize_audio_timing(audio_timing: AudioTiming, duration: float) -> AudioTiming:
    beats = sorted({b for b in audio_timing.beats if 0 <= b <= duration})
    cues = sorted(
        (
            MusicCue(time_seconds=min(cue.time_seconds, duration), kind=cue.kind)
            for cue in audio_timing.music_cues
        ),
        key=lambda c: c.time_seconds,
    )
    return AudioTiming(
        tempo_bpm=audio_timing.tempo_bpm,
        beats=tuple(beats),
        music_cues=tuple(cues),
    )


def _normalize_overlays(
    overlays: Iterable[TextOverlay],
    duration: float,
) -> tuple[TextOverlay, ...]:
    """Clamp overlays to the reel, dropping any that become empty."""
    result: list[TextOverlay] = []
    for overlay in overlays:
        start = max(overlay.start_seconds, 0.0)
        end = min(overlay.end_seconds, duration)
        if end <= start:
            continue
        result.append(
            TextOverlay(
                start_seconds=start,
                end_seconds=end,
                text=overlay.text,
                position=overlay.position,
                style=overlay.style,
            )
        )
    result.sort(key=lambda o: (o.start_seconds, o.end_seconds))
    return tuple(result)
