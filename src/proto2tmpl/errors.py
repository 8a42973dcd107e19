"""Exceptions raised by the proto2tmpl pipeline.

Every failure a caller can reasonably report back to ``protoc`` derives from
:class:`GeneratorError`; :func:`proto2tmpl.plugin.run` turns those into an
error-bearing ``CodeGeneratorResponse``.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for errors reported through the plugin response."""


class RequestReadError(GeneratorError):
    """The request stream could not be read."""


class DecodeError(GeneratorError):
    """The request bytes are not a valid ``CodeGeneratorRequest``."""


class ConfigurationError(GeneratorError):
    """The generator options are invalid."""


class UnknownOptionError(ConfigurationError):
    """A parameter token names an option that is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown option '{name}'")
        self.name = name


class MissingOptionError(ConfigurationError):
    """A required option was not provided."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Option '{name}' is required")
        self.name = name


class TemplateLoadError(GeneratorError):
    """The template source is missing, unreadable or syntactically invalid."""


class TemplateRenderError(GeneratorError):
    """The template failed while rendering a model."""


class OutputPathError(GeneratorError):
    """A generated file name points outside the output directory."""


class SchemaFileNotFoundError(GeneratorError, FileNotFoundError):
    """A requested file has no matching descriptor in the request."""

    def __init__(self, name: str) -> None:
        super().__init__(f"couldn't find file to generate: {name}")
        self.name = name

    def __str__(self) -> str:
        return f"couldn't find file to generate: {self.name}"


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "GeneratorError",
    "MissingOptionError",
    "OutputPathError",
    "RequestReadError",
    "SchemaFileNotFoundError",
    "TemplateLoadError",
    "TemplateRenderError",
    "UnknownOptionError",
]
