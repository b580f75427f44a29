"""Reel template aggregate schema."""

from enum import StrEnum, auto

from pydantic import Field, model_validator

from reel_template.common.base_template_model import BaseTemplateModel
from reel_template.template_extractor.schemas.audio_timing import AudioTiming
from reel_template.template_extractor.schemas.scene import Scene
from reel_template.template_extractor.schemas.text_overlay import TextOverlay
from reel_template.template_extractor.schemas.transition import Transition
from reel_template.template_extractor.schemas.visual_style import VisualStyle


class Pacing(StrEnum):
    """How densely the reel is cut into scenes."""

    FAST = auto()
    MEDIUM = auto()
    SLOW = auto()


class ReelTemplate(BaseTemplateModel):
    """Reusable editorial template extracted from one source reel.

    The validator rejects any value that breaks the timeline invariants, so a
    template loaded back from storage is as trustworthy as a freshly
    assembled one.
    """

    name: str
    source_ref: str
    duration_seconds: float = Field(gt=0)
    scenes: tuple[Scene, ...]
    transitions: tuple[Transition, ...] = ()
    audio_timing: AudioTiming
    visual_style: VisualStyle
    text_overlays: tuple[TextOverlay, ...] = ()
    pacing: Pacing

    @model_validator(mode="after")
    def _check_timeline(self) -> "ReelTemplate":
        duration = self.duration_seconds

        if not self.scenes:
            msg = "Template must contain at least one scene"
            raise ValueError(msg)
        if self.scenes[0].start_seconds != 0 or self.scenes[0].index != 1:
            msg = "First scene must be scene 1 starting at 0"
            raise ValueError(msg)
        if self.scenes[-1].end_seconds != duration:
            msg = "Last scene must end at the template duration"
            raise ValueError(msg)
        for expected_index, (prev, scene) in enumerate(
            zip(self.scenes, self.scenes[1:]), start=2
        ):
            if scene.start_seconds != prev.end_seconds or scene.index != expected_index:
                msg = f"Scene {scene.index} does not follow scene {prev.index}"
                raise ValueError(msg)

        times = [t.at_seconds for t in self.transitions]
        if any(b <= a for a, b in zip(times, times[1:])) or any(t > duration for t in times):
            msg = "Transitions must be unique, sorted and within the duration"
            raise ValueError(msg)

        beats = self.audio_timing.beats
        if any(b <= a for a, b in zip(beats, beats[1:])) or any(
            not 0 <= b <= duration for b in beats
        ):
            msg = "Beats must be strictly increasing and within the duration"
            raise ValueError(msg)

        starts = [o.start_seconds for o in self.text_overlays]
        if any(b < a for a, b in zip(starts, starts[1:])) or any(
            o.end_seconds > duration for o in self.text_overlays
        ):
            msg = "Text overlays must be sorted and within the duration"
            raise ValueError(msg)

        return self
