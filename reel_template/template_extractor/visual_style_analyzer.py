"""Visual style analyzer: color grading, effects and filter suggestions."""

import logging

from reel_template.reasoning import ReasoningClient, ReasoningError
from reel_template.template_extractor.fallbacks import NEUTRAL_VISUAL_STYLE
from reel_template.template_extractor.instructions import (
    GENERIC_CONTENT_PLACEHOLDER,
    VISUAL_STYLE_INSTRUCTIONS,
)
from reel_template.template_extractor.schemas import VisualStyle, VisualStyleResponse

logger = logging.getLogger(__name__)


class VisualStyleAnalyzer:
    """Suggests the visual treatment of a reel from its content."""

    def __init__(self, reasoning_client: ReasoningClient) -> None:
        """Initialize the visual style analyzer."""
        self._reasoning = reasoning_client

    async def analyze(self, transcript: str) -> VisualStyle:
        """Suggest a visual style, or the neutral style on failure."""
        prompt = f"""\
Based on this reel content, suggest its visual style.

## Content
{transcript.strip() or GENERIC_CONTENT_PLACEHOLDER}
"""
        try:
            response = await self._reasoning.ask(
                VISUAL_STYLE_INSTRUCTIONS,
                prompt,
                VisualStyleResponse,
                name="VisualStyleAnalyzer",
            )
        except ReasoningError as e:
            logger.warning("Visual style analysis degraded to neutral style: %s", e)
            return NEUTRAL_VISUAL_STYLE

        return VisualStyle(
            color_grading=response.color_grading.strip() or NEUTRAL_VISUAL_STYLE.color_grading,
            effects=tuple(response.effects),
            filters=tuple(response.filters),
        )
