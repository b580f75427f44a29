"""Transition schema."""

from enum import StrEnum, auto

from pydantic import Field

from reel_template.common.base_template_model import BaseTemplateModel


class TransitionKind(StrEnum):
    """Kind of transition between shots."""

    CUT = auto()
    FADE = auto()
    ZOOM = auto()
    SLIDE = auto()
    EFFECT = auto()


class Transition(BaseTemplateModel):
    """A timestamped transition marker."""

    at_seconds: float = Field(ge=0)
    kind: TransitionKind
    style: str
