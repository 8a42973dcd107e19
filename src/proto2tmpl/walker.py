"""Walk a FileDescriptorProto and build the template model."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from google.protobuf import descriptor_pb2

from . import model
from .type_mapper import field_type_for

logger = logging.getLogger(__name__)

# Field numbers used in SourceCodeInfo.Location paths.
_FILE_MESSAGE_TYPE = descriptor_pb2.FileDescriptorProto.MESSAGE_TYPE_FIELD_NUMBER
_FILE_SERVICE = descriptor_pb2.FileDescriptorProto.SERVICE_FIELD_NUMBER
_MESSAGE_FIELD = descriptor_pb2.DescriptorProto.FIELD_FIELD_NUMBER
_SERVICE_METHOD = descriptor_pb2.ServiceDescriptorProto.METHOD_FIELD_NUMBER

_Path = Tuple[int, ...]


class DescriptorWalker:
    """Convert a single ``FileDescriptorProto`` into :class:`model.SchemaModel`.

    Only top-level messages are emitted. Field types are mapped through
    :func:`proto2tmpl.type_mapper.map_field_type`; method input and output
    types are copied verbatim.
    """

    def __init__(self, file_proto: descriptor_pb2.FileDescriptorProto) -> None:
        self._file_proto = file_proto
        self._package = file_proto.package
        self._comments = self._index_comments(file_proto)

    def walk(self) -> model.SchemaModel:
        file_proto = self._file_proto
        logger.debug(
            "Walking %s: %d message(s), %d service(s)",
            file_proto.name,
            len(file_proto.message_type),
            len(file_proto.service),
        )
        messages = [
            self._convert_message(message_proto, (_FILE_MESSAGE_TYPE, index))
            for index, message_proto in enumerate(file_proto.message_type)
        ]
        services = [
            self._convert_service(service_proto, (_FILE_SERVICE, index))
            for index, service_proto in enumerate(file_proto.service)
        ]
        return model.SchemaModel(
            name=file_proto.name,
            package=self._package,
            messages=messages,
            services=services,
        )

    def _convert_message(
        self, message_proto: descriptor_pb2.DescriptorProto, path: _Path
    ) -> model.Message:
        message = model.Message(name=message_proto.name, comment=self._comment(path))
        for index, field_proto in enumerate(message_proto.field):
            message.fields.append(
                model.Field(
                    name=field_proto.name,
                    type=field_type_for(field_proto, self._package),
                    number=field_proto.number,
                    repeated=field_proto.label == descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED,
                    comment=self._comment(path + (_MESSAGE_FIELD, index)),
                )
            )
        return message

    def _convert_service(
        self, service_proto: descriptor_pb2.ServiceDescriptorProto, path: _Path
    ) -> model.Service:
        service = model.Service(name=service_proto.name, comment=self._comment(path))
        for index, method_proto in enumerate(service_proto.method):
            service.methods.append(
                model.Method(
                    name=method_proto.name,
                    input=method_proto.input_type,
                    output=method_proto.output_type,
                    client_streaming=method_proto.client_streaming,
                    server_streaming=method_proto.server_streaming,
                    comment=self._comment(path + (_SERVICE_METHOD, index)),
                )
            )
        return service

    def _comment(self, path: _Path) -> str:
        return self._comments.get(path, "")

    @staticmethod
    def _index_comments(file_proto: descriptor_pb2.FileDescriptorProto) -> Dict[_Path, str]:
        comments: Dict[_Path, str] = {}
        for location in file_proto.source_code_info.location:
            text = location.leading_comments.strip()
            if text:
                comments[tuple(location.path)] = text
        return comments


def walk_file(file_proto: descriptor_pb2.FileDescriptorProto) -> model.SchemaModel:
    """Shortcut for ``DescriptorWalker(file_proto).walk()``."""

    return DescriptorWalker(file_proto).walk()


__all__ = ["DescriptorWalker", "walk_file"]
