"""Providers for the reasoning client."""

from functools import cache

from reel_template.common.config import get_pipeline_config
from reel_template.reasoning.client import ReasoningClient


@cache
def reasoning_client() -> ReasoningClient:
    """Provide the single ReasoningClient shared by every analyzer."""
    config = get_pipeline_config()
    return ReasoningClient(
        config.model_identifier,
        timeout_seconds=config.reasoning_timeout_seconds,
        cache_enabled=config.reasoning_cache_enabled,
    )
