"""proto2tmpl package initialization."""

from __future__ import annotations

from . import model

__all__ = [
    "DescriptorWalker",
    "GeneratedFile",
    "GeneratorConfig",
    "GeneratorError",
    "ITemplateRenderer",
    "TemplateRenderer",
    "generate_code",
    "map_field_type",
    "model",
]


def __getattr__(name: str):
    if name == "DescriptorWalker":
        from .walker import DescriptorWalker

        return DescriptorWalker

    if name in {"GeneratedFile", "ITemplateRenderer", "TemplateRenderer"}:
        from .codegen import GeneratedFile, ITemplateRenderer, TemplateRenderer

        mapping = {
            "GeneratedFile": GeneratedFile,
            "ITemplateRenderer": ITemplateRenderer,
            "TemplateRenderer": TemplateRenderer,
        }
        return mapping[name]

    if name == "GeneratorConfig":
        from .config import GeneratorConfig

        return GeneratorConfig

    if name == "GeneratorError":
        from .errors import GeneratorError

        return GeneratorError

    if name == "generate_code":
        from .plugin import generate_code

        return generate_code

    if name == "map_field_type":
        from .type_mapper import map_field_type

        return map_field_type

    raise AttributeError(name)
