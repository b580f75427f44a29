"""Pipeline configuration and environment overrides."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field

from reel_template.common.base_template_model import BaseTemplateModel
from reel_template.common.openai_model_identifier import OpenAIModelIdentifier

# Load .env file from the repository root
_root_dir = Path(__file__).parent.parent.parent
load_dotenv(_root_dir / ".env")


class PipelineConfig(BaseTemplateModel):
    """Configuration for a template extraction / application pipeline."""

    model_identifier: OpenAIModelIdentifier = OpenAIModelIdentifier.GPT_4O

    # Media probing
    ffprobe_path: str = "ffprobe"
    probe_timeout_seconds: float = Field(default=10.0, gt=0)
    fallback_duration_seconds: float = Field(default=60.0, gt=0)

    # Reasoning service
    reasoning_timeout_seconds: float = Field(default=30.0, gt=0)
    reasoning_cache_enabled: bool = False

    # Synthetic timing heuristics
    transition_interval_seconds: float = Field(default=4.0, gt=0)
    assumed_bpm: float = Field(default=120.0, gt=0)


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_pipeline_config() -> PipelineConfig:
    """Get pipeline configuration from environment variables.

    Environment variables:
        REEL_TEMPLATE_MODEL: Reasoning model identifier (default: gpt-4o)
        FFPROBE_PATH: ffprobe executable (default: ffprobe)
        PROBE_TIMEOUT_SECONDS: Media probe timeout (default: 10)
        REASONING_TIMEOUT_SECONDS: Reasoning call timeout (default: 30)
        REASONING_CACHE_ENABLED: Cache reasoning responses by prompt hash
    """
    defaults = PipelineConfig()

    model_name = os.environ.get("REEL_TEMPLATE_MODEL")
    try:
        model_identifier = (
            OpenAIModelIdentifier(model_name) if model_name else defaults.model_identifier
        )
    except ValueError as e:
        msg = f"Unsupported REEL_TEMPLATE_MODEL: {model_name}"
        raise ValueError(msg) from e

    return PipelineConfig(
        model_identifier=model_identifier,
        ffprobe_path=os.environ.get("FFPROBE_PATH", defaults.ffprobe_path),
        probe_timeout_seconds=float(
            os.environ.get("PROBE_TIMEOUT_SECONDS", defaults.probe_timeout_seconds)
        ),
        reasoning_timeout_seconds=float(
            os.environ.get("REASONING_TIMEOUT_SECONDS", defaults.reasoning_timeout_seconds)
        ),
        reasoning_cache_enabled=_env_bool(
            "REASONING_CACHE_ENABLED", defaults.reasoning_cache_enabled
        ),
    )
