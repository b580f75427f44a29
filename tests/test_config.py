"""Tests for environment-driven configuration."""
import pytest

from reel_template.common.config import PipelineConfig, get_pipeline_config
from reel_template.common.openai_model_identifier import OpenAIModelIdentifier

ENV_VARS = [
    "REEL_TEMPLATE_MODEL",
    "FFPROBE_PATH",
    "PROBE_TIMEOUT_SECONDS",
    "REASONING_TIMEOUT_SECONDS",
    "REASONING_CACHE_ENABLED",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = get_pipeline_config()

    assert config == PipelineConfig()
    assert config.probe_timeout_seconds == 10.0
    assert config.reasoning_timeout_seconds == 30.0
    assert config.fallback_duration_seconds == 60.0
    assert config.reasoning_cache_enabled is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REEL_TEMPLATE_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("FFPROBE_PATH", "/opt/ffmpeg/bin/ffprobe")
    monkeypatch.setenv("PROBE_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("REASONING_CACHE_ENABLED", "true")

    config = get_pipeline_config()

    assert config.model_identifier == OpenAIModelIdentifier.GPT_4O_MINI
    assert config.ffprobe_path == "/opt/ffmpeg/bin/ffprobe"
    assert config.probe_timeout_seconds == 5.0
    assert config.reasoning_cache_enabled is True


def test_unknown_model_is_rejected(monkeypatch):
    monkeypatch.setenv("REEL_TEMPLATE_MODEL", "gpt-2")

    with pytest.raises(ValueError, match="REEL_TEMPLATE_MODEL"):
        get_pipeline_config()


def test_providers_share_one_reasoning_client(monkeypatch):
    from reel_template.reasoning.providers import reasoning_client
    from reel_template.template_applier.providers import template_applier_service
    from reel_template.template_extractor.providers import (
        media_probe,
        template_extractor_service,
    )

    for provider in (reasoning_client, media_probe, template_extractor_service,
                     template_applier_service):
        provider.cache_clear()
    monkeypatch.setenv("PROBE_TIMEOUT_SECONDS", "3")

    try:
        assert template_extractor_service() is template_extractor_service()
        assert template_applier_service()._reasoning is reasoning_client()
        assert template_extractor_service()._media_probe is media_probe()
        assert media_probe()._timeout_seconds == 3.0
    finally:
        for provider in (reasoning_client, media_probe, template_extractor_service,
                         template_applier_service):
            provider.cache_clear()
