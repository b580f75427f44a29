"""Template applier service: maps a template onto new content."""

import json
import logging

from reel_template.common.errors import ApplyError
from reel_template.reasoning import ReasoningClient, ReasoningError
from reel_template.template_applier.fallbacks import placeholder_instructions
from reel_template.template_applier.instructions import TEMPLATE_APPLIER_INSTRUCTIONS
from reel_template.template_applier.schemas import (
    EditingInstruction,
    EditingInstructionsResponse,
    InstructionSuggestion,
)
from reel_template.template_extractor.schemas import ReelTemplate

logger = logging.getLogger(__name__)


class TemplateApplierService:
    """Service for turning a template plus new content into editing instructions."""

    def __init__(self, reasoning_client: ReasoningClient) -> None:
        """Initialize the template applier service."""
        self._reasoning = reasoning_client

    async def apply(
        self,
        template: ReelTemplate,
        new_script: str,
        asset_refs: list[str],
        *,
        strict: bool = False,
    ) -> list[EditingInstruction]:
        """Adapt a template to a new script and asset list.

        Args:
            template: The template to reuse.
            new_script: Script for the new reel.
            asset_refs: References to the assets available for the new reel.
            strict: Raise instead of falling back to placeholder instructions.

        Returns:
            Instructions with non-decreasing timestamps. When the reasoning
            call fails, one placeholder per template scene.

        Raises:
            ApplyError: Only in strict mode, when no usable instructions came back.
        """
        prompt = self._build_prompt(template, new_script, asset_refs)
        try:
            response = await self._reasoning.ask(
                TEMPLATE_APPLIER_INSTRUCTIONS,
                prompt,
                EditingInstructionsResponse,
                strict_schema=False,
                name="TemplateApplier",
            )
        except ReasoningError as e:
            if strict:
                raise ApplyError(e) from e
            logger.warning("Template '%s' applied as placeholders: %s", template.name, e)
            return placeholder_instructions(template)

        instructions = self._to_instructions(
            response.editing_instructions, template.duration_seconds
        )
        if not instructions:
            if strict:
                raise ApplyError(ValueError("Reasoning service returned no instructions"))
            logger.warning(
                "Template '%s' applied as placeholders: no usable instructions", template.name
            )
            return placeholder_instructions(template)

        logger.info(
            "Applied template '%s': %d instructions for %d assets",
            template.name,
            len(instructions),
            len(asset_refs),
        )
        return instructions

    def _to_instructions(
        self,
        suggestions: list[InstructionSuggestion],
        duration_seconds: float,
    ) -> list[EditingInstruction]:
        """Clamp suggestions into the template and order them by timestamp."""
        instructions = [
            EditingInstruction(
                timestamp_seconds=min(max(s.timestamp_seconds, 0.0), duration_seconds),
                action=s.action,
                parameters=s.parameters,
            )
            for s in suggestions
            if s.action.strip()
        ]
        # Stable sort keeps the suggested order for equal timestamps
        instructions.sort(key=lambda i: i.timestamp_seconds)
        return instructions

    def _build_prompt(
        self,
        template: ReelTemplate,
        new_script: str,
        asset_refs: list[str],
    ) -> str:
        """Build the template application prompt."""
        structure = json.dumps(
            [scene.model_dump(mode="json") for scene in template.scenes],
            indent=2,
        )
        cut_times = ", ".join(f"{t.at_seconds:.1f}s" for t in template.transitions)
        overlays = "\n".join(
            f"  - [{o.start_seconds:.1f}s-{o.end_seconds:.1f}s] {o.position}: {o.text}"
            for o in template.text_overlays
        )
        assets = "\n".join(f"  {i}. {ref}" for i, ref in enumerate(asset_refs))
        style = template.visual_style

        return f"""\
Apply this reel template to new content.

## Template
- Name: {template.name}
- Duration: {template.duration_seconds:.2f}s
- Pacing: {template.pacing}
- Cut points: {cut_times or "none"}
- Color grading: {style.color_grading}
- Effects: {", ".join(style.effects) or "none"}
- Filters: {", ".join(style.filters) or "none"}

## Template Structure
{structure}

## Template Captions
{overlays or "  (none)"}

## New Script
{new_script.strip() or "(no script provided)"}

## Available Assets ({len(asset_refs)} files)
{assets or "  (none)"}

Generate editing instructions that adapt the template to this new content.
"""
