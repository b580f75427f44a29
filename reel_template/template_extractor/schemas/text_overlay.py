"""Text overlay schema."""

from enum import StrEnum, auto

from pydantic import Field, field_validator, model_validator

from reel_template.common.base_template_model import BaseTemplateModel


class OverlayPosition(StrEnum):
    """Vertical placement of an on-screen caption."""

    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()


class TextOverlay(BaseTemplateModel):
    """A timed on-screen caption."""

    start_seconds: float = Field(ge=0)
    end_seconds: float
    text: str
    position: OverlayPosition
    style: str | None = None

    @field_validator("text", mode="after")
    @classmethod
    def _non_empty_text(cls, text: str) -> str:
        text = text.strip()
        if not text:
            msg = "Overlay text must not be empty"
            raise ValueError(msg)
        return text

    @model_validator(mode="after")
    def _check_bounds(self) -> "TextOverlay":
        if self.end_seconds <= self.start_seconds:
            msg = f"Overlay '{self.text}' ends before it starts"
            raise ValueError(msg)
        return self
