from __future__ import annotations

"""Dataclasses forming the template-facing view of a protobuf file.

These objects are the only data a template sees. Their attribute names are
the template authoring contract:

* ``name``, ``package``, ``messages``, ``services`` at the top level
* ``message.name``, ``message.fields``, ``message.comment``
* ``field.name``, ``field.type``, ``field.number``, ``field.repeated``, ``field.comment``
* ``service.name``, ``service.methods``, ``service.comment``
* ``method.name``, ``method.input``, ``method.output``,
  ``method.client_streaming``, ``method.server_streaming``, ``method.comment``
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class Field:
    """Represents a message field with its mapped type."""

    name: str
    type: str
    number: int = 0
    repeated: bool = False
    comment: str = ""


@dataclass(slots=True)
class Message:
    """Represents a top-level message type."""

    name: str
    fields: List[Field] = field(default_factory=list)
    comment: str = ""


@dataclass(slots=True)
class Method:
    """Represents a service method.

    ``input`` and ``output`` hold the fully qualified names exactly as
    declared (for example ``.example.GetRequest``).
    """

    name: str
    input: str
    output: str
    client_streaming: bool = False
    server_streaming: bool = False
    comment: str = ""


@dataclass(slots=True)
class Service:
    """Represents a service and its methods."""

    name: str
    methods: List[Method] = field(default_factory=list)
    comment: str = ""


@dataclass(slots=True)
class SchemaModel:
    """Represents one protobuf file as seen by templates."""

    name: str
    package: str
    messages: List[Message] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)

    def template_context(self) -> Dict[str, Any]:
        """Top-level variables handed to the template."""

        return {
            "name": self.name,
            "package": self.package,
            "messages": self.messages,
            "services": self.services,
        }


@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """A single rendered output file."""

    name: str
    content: str
