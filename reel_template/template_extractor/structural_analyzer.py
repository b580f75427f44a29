"""Structural analyzer: splits the reel into narrative scenes."""

import logging

from reel_template.reasoning import ReasoningClient, ReasoningError
from reel_template.template_extractor.fallbacks import fallback_scenes
from reel_template.template_extractor.instructions import (
    NO_TRANSCRIPT_PLACEHOLDER,
    STRUCTURE_INSTRUCTIONS,
)
from reel_template.template_extractor.schemas import (
    Scene,
    SceneSuggestion,
    StructureResponse,
)

logger = logging.getLogger(__name__)


class StructuralAnalyzer:
    """Derives ordered hook/buildup/climax/cta scenes from a transcript."""

    def __init__(self, reasoning_client: ReasoningClient) -> None:
        """Initialize the structural analyzer."""
        self._reasoning = reasoning_client

    async def analyze(self, transcript: str, duration_seconds: float) -> list[Scene]:
        """Segment the timeline into scenes.

        A single reasoning call is made. If it fails, or none of the
        suggested scenes fit inside the reel, the fixed three-scene skeleton
        from ``fallback_scenes`` is returned instead.

        Args:
            transcript: Reel transcript, possibly empty.
            duration_seconds: Total reel duration.

        Returns:
            Scenes in the order suggested, each within ``[0, duration_seconds]``.
        """
        prompt = self._build_prompt(transcript, duration_seconds)
        try:
            response = await self._reasoning.ask(
                STRUCTURE_INSTRUCTIONS,
                prompt,
                StructureResponse,
                name="StructuralAnalyzer",
            )
        except ReasoningError as e:
            logger.warning("Structure analysis degraded to fallback scenes: %s", e)
            return fallback_scenes(duration_seconds)

        scenes = self._to_scenes(response.structure, duration_seconds)
        if not scenes:
            logger.warning(
                "Structure response had no usable scenes (%d suggested), using fallback",
                len(response.structure),
            )
            return fallback_scenes(duration_seconds)

        logger.info("Structure analysis found %d scenes", len(scenes))
        return scenes

    def _to_scenes(
        self,
        suggestions: list[SceneSuggestion],
        duration_seconds: float,
    ) -> list[Scene]:
        """Keep the suggestions that describe a non-empty span of the reel."""
        scenes: list[Scene] = []
        for suggestion in suggestions:
            start = max(0.0, suggestion.start_seconds)
            end = min(duration_seconds, suggestion.end_seconds)
            if end <= start:
                logger.debug(
                    "Dropping scene %d: [%.2f, %.2f] is empty within %.2fs",
                    suggestion.index,
                    suggestion.start_seconds,
                    suggestion.end_seconds,
                    duration_seconds,
                )
                continue
            scenes.append(
                Scene(
                    index=max(1, suggestion.index),
                    start_seconds=start,
                    end_seconds=end,
                    kind=suggestion.kind,
                    description=suggestion.description.strip(),
                )
            )
        return scenes

    def _build_prompt(self, transcript: str, duration_seconds: float) -> str:
        """Build the structure prompt."""
        return f"""\
Analyze this reel transcript and break it into structural components.

## Reel
- Duration: {duration_seconds:.2f}s

## Transcript
{transcript.strip() or NO_TRANSCRIPT_PLACEHOLDER}

For each scene return its index (1, 2, 3...), start_seconds, end_seconds, \
kind (hook, buildup, climax, cta or other) and a brief description of what \
happens.
"""
