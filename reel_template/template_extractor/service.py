"""Template extractor service: runs the full reel analysis pipeline."""

import asyncio
import logging
import uuid
from collections.abc import Callable
from pathlib import Path

from reel_template.common.config import PipelineConfig
from reel_template.common.errors import InvalidInputError
from reel_template.media_probe import MediaProbe
from reel_template.reasoning import ReasoningClient
from reel_template.template_extractor.assembler import assemble_template
from reel_template.template_extractor.audio_timing import extract_audio_timing
from reel_template.template_extractor.schemas import (
    AudioTiming,
    PipelineStage,
    ReelTemplate,
    Transition,
)
from reel_template.template_extractor.structural_analyzer import StructuralAnalyzer
from reel_template.template_extractor.text_overlay_extractor import TextOverlayExtractor
from reel_template.template_extractor.transition_detector import detect_transitions
from reel_template.template_extractor.visual_style_analyzer import VisualStyleAnalyzer

logger = logging.getLogger(__name__)

StageCallback = Callable[[PipelineStage], None]


class TemplateExtractorService:
    """Service for extracting reusable templates from short-form reels.

    Extraction never fails because a stage failed: each stage falls back to
    a documented default and the run still completes with a template.
    Only a missing media path or caller cancellation end a run early.
    """

    def __init__(
        self,
        reasoning_client: ReasoningClient,
        media_probe: MediaProbe,
        config: PipelineConfig | None = None,
    ) -> None:
        """Initialize the extractor with its shared collaborators."""
        config = config or PipelineConfig()
        self._media_probe = media_probe
        self._structural_analyzer = StructuralAnalyzer(reasoning_client)
        self._visual_style_analyzer = VisualStyleAnalyzer(reasoning_client)
        self._text_overlay_extractor = TextOverlayExtractor(reasoning_client)
        self._transition_interval_seconds = config.transition_interval_seconds
        self._tempo_bpm = config.assumed_bpm

    async def extract(
        self,
        media_path: str | Path | None,
        transcript: str | None = None,
        *,
        source_ref: str | None = None,
        name: str | None = None,
        on_stage: StageCallback | None = None,
    ) -> ReelTemplate:
        """Extract a template from a local reel file.

        Args:
            media_path: Path to the local media file.
            transcript: Optional plain-text transcript.
            source_ref: Reference stored on the template (e.g. the original
                URL). Defaults to the media path.
            name: Optional template name.
            on_stage: Optional callback called on every stage transition.

        Returns:
            The assembled ReelTemplate, possibly built from fallbacks.

        Raises:
            InvalidInputError: If no media path is given.
        """
        if _is_blank_path(media_path):
            msg = "A media path is required to extract a template"
            raise InvalidInputError(msg)

        media_path = Path(media_path)
        transcript = transcript or ""
        run_id = uuid.uuid4().hex[:8]

        def enter(stage: PipelineStage) -> None:
            logger.info("[run=%s] Stage: %s", run_id, stage)
            if on_stage:
                on_stage(stage)

        enter(PipelineStage.PENDING)

        enter(PipelineStage.PROBING_MEDIA)
        media_info = await self._media_probe.probe(media_path)
        duration = media_info.duration_seconds
        if media_info.is_fallback:
            logger.warning(
                "[run=%s] Using fallback duration %.1fs for %s",
                run_id,
                duration,
                media_path,
            )

        enter(PipelineStage.ANALYZING_STAGES)
        scenes, transitions, audio_timing, visual_style, text_overlays = await asyncio.gather(
            self._structural_analyzer.analyze(transcript, duration),
            self._detect_transitions(duration),
            self._extract_audio_timing(duration),
            self._visual_style_analyzer.analyze(transcript),
            self._text_overlay_extractor.extract(transcript, duration),
        )

        enter(PipelineStage.ASSEMBLING)
        template = assemble_template(
            source_ref=source_ref or str(media_path),
            duration_seconds=duration,
            scenes=scenes,
            transitions=transitions,
            audio_timing=audio_timing,
            visual_style=visual_style,
            text_overlays=text_overlays,
            name=name,
        )

        enter(PipelineStage.COMPLETED)
        logger.info(
            "[run=%s] Template ready: duration=%.2fs, %d scenes, %d transitions, "
            "%d beats, %d overlays, pacing=%s",
            run_id,
            template.duration_seconds,
            len(template.scenes),
            len(template.transitions),
            len(template.audio_timing.beats),
            len(template.text_overlays),
            template.pacing,
        )
        return template

    def extract_sync(
        self,
        media_path: str | Path | None,
        transcript: str | None = None,
        *,
        source_ref: str | None = None,
        name: str | None = None,
        on_stage: StageCallback | None = None,
    ) -> ReelTemplate:
        """Extract a template from a local reel file (sync version)."""
        return asyncio.run(
            self.extract(
                media_path,
                transcript,
                source_ref=source_ref,
                name=name,
                on_stage=on_stage,
            )
        )

    async def _detect_transitions(self, duration: float) -> list[Transition]:
        return detect_transitions(duration, self._transition_interval_seconds)

    async def _extract_audio_timing(self, duration: float) -> AudioTiming:
        return extract_audio_timing(duration, self._tempo_bpm)


def _is_blank_path(media_path: str | Path | None) -> bool:
    # Path("") renders as ".", so check the raw value before converting
    if media_path is None:
        return True
    if isinstance(media_path, str):
        return not media_path.strip()
    return media_path == Path("")
