from __future__ import annotations

import pytest

pytest.importorskip("google.protobuf")

from google.protobuf import descriptor_pb2

from proto2tmpl.type_mapper import (
    ARRAY_SUFFIX,
    ENUM_PLACEHOLDER,
    NUMBER_TYPE,
    NUMERIC_32_TYPES,
    NUMERIC_64_TYPES,
    UNMAPPED_TYPE,
    field_type_for,
    map_field_type,
    strip_package,
)

FDP = descriptor_pb2.FieldDescriptorProto

OPTIONAL = FDP.LABEL_OPTIONAL
REPEATED = FDP.LABEL_REPEATED

ALL_TYPES = sorted(FDP.Type.values())


@pytest.mark.parametrize("field_type", sorted(NUMERIC_32_TYPES))
@pytest.mark.parametrize(
    "type_name, package",
    [("", ""), ("", "example"), (".other.Thing", "other"), (".x.Y", "z.w")],
)
def test_32_bit_numbers_map_to_number(field_type: int, type_name: str, package: str) -> None:
    assert map_field_type(field_type, OPTIONAL, type_name, package) == NUMBER_TYPE


@pytest.mark.parametrize("field_type", sorted(NUMERIC_64_TYPES))
def test_64_bit_numbers_map_to_string(field_type: int) -> None:
    mapped = map_field_type(field_type, OPTIONAL, "", "example")
    assert mapped == "string"
    assert mapped != NUMBER_TYPE


def test_numeric_type_sets_cover_all_numeric_wire_types() -> None:
    assert len(NUMERIC_32_TYPES) == 7
    assert len(NUMERIC_64_TYPES) == 5
    assert not NUMERIC_32_TYPES & NUMERIC_64_TYPES


@pytest.mark.parametrize(
    "field_type, expected",
    [
        (FDP.TYPE_BOOL, "boolean"),
        (FDP.TYPE_STRING, "string"),
        (FDP.TYPE_BYTES, UNMAPPED_TYPE),
        (FDP.TYPE_GROUP, UNMAPPED_TYPE),
        (FDP.TYPE_ENUM, ENUM_PLACEHOLDER),
    ],
)
def test_other_scalar_types(field_type: int, expected: str) -> None:
    assert map_field_type(field_type, OPTIONAL, ".example.Color", "example") == expected


def test_unknown_wire_type_falls_back_to_unmapped() -> None:
    assert map_field_type(99, OPTIONAL, "", "example") == UNMAPPED_TYPE


def test_message_in_same_package_is_stripped() -> None:
    assert map_field_type(FDP.TYPE_MESSAGE, OPTIONAL, ".pkgA.Foo", "pkgA") == "Foo"


def test_nested_message_keeps_parent_name() -> None:
    assert (
        map_field_type(FDP.TYPE_MESSAGE, OPTIONAL, ".demo.v1.Outer.Inner", "demo.v1")
        == "Outer.Inner"
    )


@pytest.mark.parametrize(
    "type_name, package",
    [
        (".pkgB.Foo", "pkgA"),
        (".pkgAB.Foo", "pkgA"),
        (".pkgA.sub.Foo", "pkgA.sub.deeper"),
        (".google.protobuf.Timestamp", "example"),
        (".other.Foo", ""),
        (".other.v1.Foo", None),
    ],
)
def test_message_from_other_package_is_unchanged(type_name: str, package: str) -> None:
    assert map_field_type(FDP.TYPE_MESSAGE, OPTIONAL, type_name, package) == type_name


def test_message_without_package_drops_leading_dot() -> None:
    assert map_field_type(FDP.TYPE_MESSAGE, OPTIONAL, ".Foo", "") == "Foo"
    assert strip_package(".Foo", None) == "Foo"


@pytest.mark.parametrize("field_type", ALL_TYPES)
def test_repeated_appends_array_suffix(field_type: int) -> None:
    base = map_field_type(field_type, OPTIONAL, ".example.Item", "example")
    repeated = map_field_type(field_type, REPEATED, ".example.Item", "example")
    assert repeated == base + ARRAY_SUFFIX


def test_required_label_is_not_repeated() -> None:
    assert map_field_type(FDP.TYPE_STRING, FDP.LABEL_REQUIRED, "", "example") == "string"


def test_mapping_is_deterministic() -> None:
    args = (FDP.TYPE_MESSAGE, REPEATED, ".example.Item", "example")
    assert map_field_type(*args) == map_field_type(*args) == "Item[]"


def test_field_type_for_reads_descriptor() -> None:
    field_proto = FDP(
        name="tags",
        number=1,
        label=REPEATED,
        type=FDP.TYPE_MESSAGE,
        type_name=".example.Tag",
    )
    assert field_type_for(field_proto, "example") == "Tag[]"
