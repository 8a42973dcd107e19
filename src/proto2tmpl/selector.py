"""Locate requested files among the descriptors supplied by ``protoc``."""

from __future__ import annotations

from typing import Iterable, List

from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

from .errors import SchemaFileNotFoundError


def select_file(
    request: plugin_pb2.CodeGeneratorRequest, name: str
) -> descriptor_pb2.FileDescriptorProto:
    """Return the ``FileDescriptorProto`` whose name equals ``name``."""

    for file_proto in request.proto_file:
        if file_proto.name == name:
            return file_proto
    raise SchemaFileNotFoundError(name)


def select_files(
    request: plugin_pb2.CodeGeneratorRequest, names: Iterable[str]
) -> List[descriptor_pb2.FileDescriptorProto]:
    """Resolve every name in ``names``, preserving order."""

    return [select_file(request, name) for name in names]


__all__ = ["select_file", "select_files"]
