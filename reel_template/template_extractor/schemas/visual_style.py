"""Visual style schema."""

from pydantic import field_validator

from reel_template.common.base_template_model import BaseTemplateModel


class VisualStyle(BaseTemplateModel):
    """Color grading, effects and filters suggested for the reel.

    ``effects`` and ``filters`` behave as sets: entries are stripped,
    de-duplicated and kept in sorted order so serialisation is stable.
    """

    color_grading: str
    effects: tuple[str, ...] = ()
    filters: tuple[str, ...] = ()

    @field_validator("effects", "filters", mode="after")
    @classmethod
    def _as_sorted_set(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(sorted({v.strip() for v in values if v.strip()}))
