"""Reading ``CodeGeneratorRequest`` and writing ``CodeGeneratorResponse`` messages."""

from __future__ import annotations

import logging
import os
import posixpath
from typing import BinaryIO, Iterable

from google.protobuf import message as protobuf_message
from google.protobuf.compiler import plugin_pb2

from .errors import DecodeError, RequestReadError
from .model import GeneratedFile

logger = logging.getLogger(__name__)

DUMP_ENV_VAR = "PROTO2TMPL_DUMP"

_SUPPORTED_FEATURES = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL


def decode_request(payload: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Parse ``payload`` into a ``CodeGeneratorRequest``."""

    request = plugin_pb2.CodeGeneratorRequest()
    if not payload:
        return request
    try:
        request.ParseFromString(payload)
    except protobuf_message.DecodeError as exc:
        logger.error("Failed to unmarshal code generator request: %s", exc)
        raise DecodeError(f"unable to parse protobuf: {exc}") from exc
    return request


def read_request(stream: BinaryIO) -> plugin_pb2.CodeGeneratorRequest:
    """Read ``stream`` to completion and decode the request it carries."""

    logger.info("Parsing code generator request")
    try:
        payload = stream.read()
    except OSError as exc:
        logger.error("Failed to read code generator request: %s", exc)
        raise RequestReadError(f"unable to read code generator request: {exc}") from exc

    dump_path = os.environ.get(DUMP_ENV_VAR)
    if dump_path:
        dump_request(dump_path, payload)

    request = decode_request(payload)
    logger.info("Parsed code generator request")
    return request


def dump_request(dump_path: str, payload: bytes) -> None:
    """Write the raw request so the plugin can be replayed from a file."""

    logger.warning("Writing input from protoc to: %s", dump_path)
    try:
        with open(dump_path, "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        logger.warning("Unable to dump request to %s: %s", dump_path, exc)


def output_file_name(source_name: str, file_ext: str) -> str:
    """Replace the extension of ``source_name`` with ``file_ext``.

    ``foo/bar.proto`` with ``ts`` becomes ``foo/bar.ts``.
    """

    base, _ = posixpath.splitext(source_name)
    return f"{base}.{file_ext.lstrip('.')}"


def trim_leading_blank_lines(content: str) -> str:
    """Drop the blank lines templates commonly open with."""

    return content.lstrip("\n")


def files_response(files: Iterable[GeneratedFile]) -> plugin_pb2.CodeGeneratorResponse:
    """Build a successful response; leading blank lines are trimmed from content."""

    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = _SUPPORTED_FEATURES
    for generated in files:
        response_file = response.file.add()
        response_file.name = generated.name
        response_file.content = trim_leading_blank_lines(generated.content)
    return response


def error_response(message: str) -> plugin_pb2.CodeGeneratorResponse:
    """Build a response carrying only ``message``."""

    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = _SUPPORTED_FEATURES
    response.error = message
    return response


def write_response(stream: BinaryIO, response: plugin_pb2.CodeGeneratorResponse) -> None:
    """Serialize ``response`` to ``stream``.

    Write failures propagate to the caller.
    """

    stream.write(response.SerializeToString())
    stream.flush()


__all__ = [
    "DUMP_ENV_VAR",
    "decode_request",
    "dump_request",
    "error_response",
    "files_response",
    "output_file_name",
    "read_request",
    "trim_leading_blank_lines",
    "write_response",
]
