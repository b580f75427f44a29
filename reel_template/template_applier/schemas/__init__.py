"""Template applier schemas."""

from reel_template.template_applier.schemas.editing_instruction import (
    EditingInstruction,
    EditingInstructionsResponse,
    InstructionSuggestion,
)

__all__ = [
    "EditingInstruction",
    "EditingInstructionsResponse",
    "InstructionSuggestion",
]
