"""Providers for template applier service."""

from functools import cache

from reel_template.reasoning.providers import reasoning_client
from reel_template.template_applier.service import TemplateApplierService


@cache
def template_applier_service() -> TemplateApplierService:
    """Provide a singleton instance of the TemplateApplierService."""
    return TemplateApplierService(reasoning_client())
