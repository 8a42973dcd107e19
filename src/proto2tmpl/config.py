"""Configuration helpers for proto2tmpl code generation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Tuple

from .errors import MissingOptionError, UnknownOptionError

TEMPLATE_PATH = "template_path"
FILE_EXT = "file_ext"

KNOWN_OPTIONS: Tuple[str, ...] = (TEMPLATE_PATH, FILE_EXT)


def parse_parameter_tokens(parameter: str | None) -> List[Tuple[str, str]]:
    """Split a ``protoc`` parameter string into ``(name, value)`` pairs.

    Tokens are comma separated and split on the first ``=``. A token without
    ``=`` yields an empty value. Empty tokens are skipped.
    """

    if not parameter:
        return []

    tokens: List[Tuple[str, str]] = []
    for chunk in parameter.split(","):
        if not chunk:
            continue
        name, _, value = chunk.partition("=")
        tokens.append((name, value))
    return tokens


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Runtime configuration for proto2tmpl generation."""

    template_path: str = ""
    file_ext: str = ""

    @classmethod
    def from_parameter_string(
        cls,
        parameter: str | None,
        *,
        defaults: "GeneratorConfig | None" = None,
    ) -> "GeneratorConfig":
        """Apply ``parameter`` on top of ``defaults``.

        Raises :class:`UnknownOptionError` for any option outside
        :data:`KNOWN_OPTIONS`; nothing is applied in that case.
        """

        base = defaults or cls()
        overrides: Dict[str, str] = {}
        for name, value in parse_parameter_tokens(parameter):
            if name not in KNOWN_OPTIONS:
                raise UnknownOptionError(name)
            overrides[name] = value

        if not overrides:
            return base
        return replace(base, **overrides)

    def validate(self) -> "GeneratorConfig":
        for name in KNOWN_OPTIONS:
            if not getattr(self, name):
                raise MissingOptionError(name)
        return self


__all__ = [
    "FILE_EXT",
    "GeneratorConfig",
    "KNOWN_OPTIONS",
    "TEMPLATE_PATH",
    "parse_parameter_tokens",
]
