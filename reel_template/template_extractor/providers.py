"""Providers for template extractor service."""

from functools import cache

from reel_template.common.config import get_pipeline_config
from reel_template.media_probe import MediaProbe
from reel_template.reasoning.providers import reasoning_client
from reel_template.template_extractor.service import TemplateExtractorService


@cache
def media_probe() -> MediaProbe:
    """Provide a singleton instance of the MediaProbe."""
    config = get_pipeline_config()
    return MediaProbe(
        ffprobe_path=config.ffprobe_path,
        timeout_seconds=config.probe_timeout_seconds,
        fallback_duration_seconds=config.fallback_duration_seconds,
    )


@cache
def template_extractor_service() -> TemplateExtractorService:
    """Provide a singleton instance of the TemplateExtractorService."""
    return TemplateExtractorService(
        reasoning_client(),
        media_probe(),
        get_pipeline_config(),
    )
