"""Template extractor schemas."""

from reel_template.template_extractor.schemas.audio_timing import AudioTiming, MusicCue
from reel_template.template_extractor.schemas.pipeline_stage import PipelineStage
from reel_template.template_extractor.schemas.responses import (
    OverlayResponse,
    OverlaySuggestion,
    SceneSuggestion,
    StructureResponse,
    VisualStyleResponse,
)
from reel_template.template_extractor.schemas.scene import Scene, SceneKind
from reel_template.template_extractor.schemas.template import Pacing, ReelTemplate
from reel_template.template_extractor.schemas.text_overlay import (
    OverlayPosition,
    TextOverlay,
)
from reel_template.template_extractor.schemas.transition import Transition, TransitionKind
from reel_template.template_extractor.schemas.visual_style import VisualStyle

__all__ = [
    "AudioTiming",
    "MusicCue",
    "OverlayPosition",
    "OverlayResponse",
    "OverlaySuggestion",
    "Pacing",
    "PipelineStage",
    "ReelTemplate",
    "Scene",
    "SceneKind",
    "SceneSuggestion",
    "StructureResponse",
    "TextOverlay",
    "Transition",
    "TransitionKind",
    "VisualStyle",
    "VisualStyleResponse",
]
