"""Pipeline stage schema."""

from enum import StrEnum, auto


class PipelineStage(StrEnum):
    """Logical stages of one extraction run.

    There is no failed stage: stage-level errors degrade the template
    instead of aborting the run.
    """

    PENDING = auto()
    PROBING_MEDIA = auto()
    ANALYZING_STAGES = auto()
    ASSEMBLING = auto()
    COMPLETED = auto()
