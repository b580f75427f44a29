"""Text overlay extractor: timed caption suggestions."""

import logging

from pydantic import ValidationError

from reel_template.reasoning import ReasoningClient, ReasoningError
from reel_template.template_extractor.fallbacks import EMPTY_TEXT_OVERLAYS
from reel_template.template_extractor.instructions import TEXT_OVERLAY_INSTRUCTIONS
from reel_template.template_extractor.schemas import (
    OverlayResponse,
    OverlaySuggestion,
    TextOverlay,
)

logger = logging.getLogger(__name__)


class TextOverlayExtractor:
    """Suggests on-screen captions for the impactful moments of a reel."""

    def __init__(self, reasoning_client: ReasoningClient) -> None:
        """Initialize the text overlay extractor."""
        self._reasoning = reasoning_client

    async def extract(self, transcript: str, duration_seconds: float) -> list[TextOverlay]:
        """Suggest timed captions from the transcript.

        Without a transcript no reasoning call is made. On failure no
        captions are returned: made-up captions are worse than none.

        Args:
            transcript: Reel transcript, possibly empty.
            duration_seconds: Total reel duration.

        Returns:
            Captions that fit inside ``[0, duration_seconds]``.
        """
        if not transcript.strip():
            return list(EMPTY_TEXT_OVERLAYS)

        prompt = f"""\
Identify key text overlays for this reel transcript.

## Reel
- Duration: {duration_seconds:.2f}s

## Transcript
{transcript.strip()}
"""
        try:
            response = await self._reasoning.ask(
                TEXT_OVERLAY_INSTRUCTIONS,
                prompt,
                OverlayResponse,
                name="TextOverlayExtractor",
            )
        except ReasoningError as e:
            logger.warning("Text overlay extraction degraded to no overlays: %s", e)
            return list(EMPTY_TEXT_OVERLAYS)

        overlays = [
            overlay
            for suggestion in response.overlays
            if (overlay := self._to_overlay(suggestion, duration_seconds)) is not None
        ]
        logger.info(
            "Text overlay extraction kept %d of %d suggestions",
            len(overlays),
            len(response.overlays),
        )
        return overlays

    def _to_overlay(
        self,
        suggestion: OverlaySuggestion,
        duration_seconds: float,
    ) -> TextOverlay | None:
        try:
            return TextOverlay(
                start_seconds=max(0.0, suggestion.start_seconds),
                end_seconds=min(duration_seconds, suggestion.end_seconds),
                text=suggestion.text,
                position=suggestion.position,
                style=(suggestion.style or "").strip() or None,
            )
        except ValidationError as e:
            logger.debug("Dropping overlay %r: %s", suggestion.text, e)
            return None
