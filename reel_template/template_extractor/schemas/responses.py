"""Response schemas expected from the reasoning service, one per stage."""

from reel_template.common.base_template_model import BaseTemplateModel
from reel_template.template_extractor.schemas.scene import SceneKind
from reel_template.template_extractor.schemas.text_overlay import OverlayPosition


class SceneSuggestion(BaseTemplateModel):
    """One narrative segment proposed by the reasoning service."""

    index: int
    start_seconds: float
    end_seconds: float
    kind: SceneKind
    description: str


class StructureResponse(BaseTemplateModel):
    """Response for the structural analysis stage."""

    structure: list[SceneSuggestion]


class VisualStyleResponse(BaseTemplateModel):
    """Response for the visual style stage."""

    color_grading: str
    effects: list[str]
    filters: list[str]


class OverlaySuggestion(BaseTemplateModel):
    """One caption proposed by the reasoning service."""

    start_seconds: float
    end_seconds: float
    text: str
    position: OverlayPosition
    style: str | None


class OverlayResponse(BaseTemplateModel):
    """Response for the text overlay stage."""

    overlays: list[OverlaySuggestion]
