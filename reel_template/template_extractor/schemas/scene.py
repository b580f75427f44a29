"""Scene schema."""

from enum import StrEnum, auto

from pydantic import Field, model_validator

from reel_template.common.base_template_model import BaseTemplateModel


class SceneKind(StrEnum):
    """Narrative role of a scene."""

    HOOK = auto()
    BUILDUP = auto()
    CLIMAX = auto()
    CTA = auto()
    OTHER = auto()


class Scene(BaseTemplateModel):
    """A labeled time segment of the reel."""

    index: int = Field(ge=1)
    start_seconds: float = Field(ge=0)
    end_seconds: float
    kind: SceneKind
    description: str = ""

    @model_validator(mode="after")
    def _check_bounds(self) -> "Scene":
        if self.end_seconds <= self.start_seconds:
            msg = (
                f"Scene {self.index} ends at {self.end_seconds}s, "
                f"not after its start {self.start_seconds}s"
            )
            raise ValueError(msg)
        return self

    @property
    def duration_seconds(self) -> float:
        """Length of the scene."""
        return self.end_seconds - self.start_seconds
