"""Editing instruction schemas."""

from typing import Any

from pydantic import Field, field_validator

from reel_template.common.base_template_model import BaseTemplateModel


class EditingInstruction(BaseTemplateModel):
    """One timed instruction for the downstream editing layer."""

    timestamp_seconds: float = Field(ge=0)
    action: str
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("action", mode="after")
    @classmethod
    def _non_empty_action(cls, action: str) -> str:
        action = action.strip()
        if not action:
            msg = "Instruction action must not be empty"
            raise ValueError(msg)
        return action


class InstructionSuggestion(BaseTemplateModel):
    """One instruction proposed by the reasoning service."""

    timestamp_seconds: float
    action: str
    parameters: dict[str, Any]


class EditingInstructionsResponse(BaseTemplateModel):
    """Response for the template application call."""

    editing_instructions: list[InstructionSuggestion]
