"""Reasoning service adapter."""

from reel_template.reasoning.client import ReasoningClient, ReasoningError

__all__ = ["ReasoningClient", "ReasoningError"]
