"""Audio timing schemas."""

from pydantic import Field

from reel_template.common.base_template_model import BaseTemplateModel


class MusicCue(BaseTemplateModel):
    """A coarse marker in the soundtrack (intro, buildup, climax...)."""

    time_seconds: float = Field(ge=0)
    kind: str


class AudioTiming(BaseTemplateModel):
    """Beat grid and music cues for the reel."""

    tempo_bpm: float = Field(gt=0)
    beats: tuple[float, ...] = ()
    music_cues: tuple[MusicCue, ...] = ()
