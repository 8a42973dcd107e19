"""Map protobuf field descriptors to target language type strings."""

from __future__ import annotations

from typing import Dict, FrozenSet

from google.protobuf import descriptor_pb2

_FieldType = descriptor_pb2.FieldDescriptorProto

NUMBER_TYPE = "number"
STRING_TYPE = "string"
BOOLEAN_TYPE = "boolean"
UNMAPPED_TYPE = "any"
# Enum values are not resolved; templates may rely on this exact text.
ENUM_PLACEHOLDER = "UNKNOWN TYPE"
ARRAY_SUFFIX = "[]"

NUMERIC_32_TYPES: FrozenSet[int] = frozenset(
    {
        _FieldType.TYPE_DOUBLE,
        _FieldType.TYPE_FLOAT,
        _FieldType.TYPE_INT32,
        _FieldType.TYPE_FIXED32,
        _FieldType.TYPE_UINT32,
        _FieldType.TYPE_SFIXED32,
        _FieldType.TYPE_SINT32,
    }
)

# Most target runtimes cannot hold 64-bit integers losslessly as numbers.
NUMERIC_64_TYPES: FrozenSet[int] = frozenset(
    {
        _FieldType.TYPE_INT64,
        _FieldType.TYPE_UINT64,
        _FieldType.TYPE_FIXED64,
        _FieldType.TYPE_SFIXED64,
        _FieldType.TYPE_SINT64,
    }
)

_SCALAR_MAPPING: Dict[int, str] = {
    **{field_type: NUMBER_TYPE for field_type in NUMERIC_32_TYPES},
    **{field_type: STRING_TYPE for field_type in NUMERIC_64_TYPES},
    _FieldType.TYPE_BOOL: BOOLEAN_TYPE,
    _FieldType.TYPE_STRING: STRING_TYPE,
    _FieldType.TYPE_ENUM: ENUM_PLACEHOLDER,
}


def strip_package(type_name: str, package: str | None) -> str:
    """Return ``type_name`` relative to ``package``.

    ``.pkg.Foo`` becomes ``Foo`` inside ``pkg``. Names from any other package
    are returned unchanged, including names from a package that merely
    shares a prefix with ``package``. Without a package only a bare ``.Foo``
    is shortened.
    """

    if not package:
        # Only names declared without a package lose their leading dot.
        bare = type_name[1:] if type_name.startswith(".") else type_name
        return bare if "." not in bare else type_name

    prefix = f".{package}."
    if type_name.startswith(prefix):
        return type_name[len(prefix):]
    return type_name


def map_field_type(
    field_type: int,
    label: int,
    type_name: str | None,
    package: str | None,
) -> str:
    """Return the mapped type string for a field.

    The result depends only on the arguments. Unrecognized wire types map to
    :data:`UNMAPPED_TYPE` instead of failing.
    """

    if field_type == _FieldType.TYPE_MESSAGE:
        mapped = strip_package(type_name or "", package)
    else:
        mapped = _SCALAR_MAPPING.get(field_type, UNMAPPED_TYPE)

    if label == _FieldType.LABEL_REPEATED:
        mapped += ARRAY_SUFFIX
    return mapped


def field_type_for(field_proto: descriptor_pb2.FieldDescriptorProto, package: str | None) -> str:
    """Convenience wrapper around :func:`map_field_type` for a descriptor."""

    return map_field_type(field_proto.type, field_proto.label, field_proto.type_name, package)


__all__ = [
    "ARRAY_SUFFIX",
    "BOOLEAN_TYPE",
    "ENUM_PLACEHOLDER",
    "NUMBER_TYPE",
    "NUMERIC_32_TYPES",
    "NUMERIC_64_TYPES",
    "STRING_TYPE",
    "UNMAPPED_TYPE",
    "field_type_for",
    "map_field_type",
    "strip_package",
]
