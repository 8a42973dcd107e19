"""Template rendering for proto2tmpl."""

from __future__ import annotations

from ..model import GeneratedFile
from .renderer import ITemplateRenderer, TemplateRenderer, create_environment

__all__ = ["GeneratedFile", "ITemplateRenderer", "TemplateRenderer", "create_environment"]
