# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for type descriptors and their normalization."""

import copy
from datetime import datetime
from enum import Enum

import pytest
from pydantic import ValidationError

from dodopayments.core.model import SdkModel, SdkUnion
from dodopayments.core.registry import api
from dodopayments.core.types import (
    BOOL,
    DATETIME,
    FLOAT,
    INT,
    STRING,
    UNSET,
    EnumOf,
    ListOf,
    MapOf,
    ModelOf,
    Primitive,
    PrimitiveKind,
    UnionOf,
    descriptor_for,
)
from dodopayments.errors import RegistryError

# ###############
# Helpers
# ###############


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


class Level(int, Enum):
    LOW = 1
    HIGH = 2


class Point(SdkModel):
    x = api(int)
    y = api(int)


class Label(SdkModel):
    text = api(str)


class Shape(SdkUnion):
    variants = (Point, Label)


# ###############
# Unset marker
# ###############


def test_unset_is_falsy_and_prints_its_name() -> None:
    assert not UNSET
    assert repr(UNSET) == "UNSET"


def test_unset_survives_copies_as_the_same_object() -> None:
    assert copy.copy(UNSET) is UNSET
    assert copy.deepcopy({"a": UNSET})["a"] is UNSET


# ###############
# descriptor_for
# ###############


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (str, STRING),
        (int, INT),
        (float, FLOAT),
        (bool, BOOL),
        (datetime, DATETIME),
    ],
)
def test_builtin_types_map_to_primitives(source: type, expected: Primitive) -> None:
    assert descriptor_for(source) == expected


def test_descriptor_instances_pass_through_unchanged() -> None:
    descriptor = ListOf(int)
    assert descriptor_for(descriptor) is descriptor


def test_enum_class_becomes_enum_descriptor() -> None:
    assert descriptor_for(Color) == EnumOf(Color)


def test_model_class_becomes_model_descriptor() -> None:
    assert descriptor_for(Point) == ModelOf(Point)


def test_union_class_becomes_union_descriptor() -> None:
    descriptor = descriptor_for(Shape)
    assert isinstance(descriptor, UnionOf)
    assert descriptor.variants == (ModelOf(Point), ModelOf(Label))


def test_union_converter_is_cached() -> None:
    assert Shape.converter() is Shape.converter()


@pytest.mark.parametrize("source", [dict, object, 42, "string", None])
def test_unknown_sources_are_rejected(source: object) -> None:
    with pytest.raises(RegistryError, match="Cannot derive a type descriptor"):
        descriptor_for(source)


# ###############
# Container descriptors
# ###############


def test_list_element_sources_are_normalized() -> None:
    assert ListOf(str).element == STRING
    assert ListOf(Point).element == ModelOf(Point)
    assert ListOf(ListOf(int)).element == ListOf(INT)


def test_map_element_sources_are_normalized() -> None:
    descriptor = MapOf(Color, nullable=True)
    assert descriptor.element == EnumOf(Color)
    assert descriptor.nullable is True


def test_list_rejects_unknown_element_source() -> None:
    with pytest.raises((RegistryError, ValidationError)):
        ListOf(dict)


def test_descriptors_are_immutable() -> None:
    descriptor = ListOf(int)
    with pytest.raises(ValidationError):
        descriptor.nullable = True  # type: ignore[misc]


def test_equal_descriptors_compare_equal() -> None:
    assert ListOf(int) == ListOf(INT)
    assert MapOf(str) != MapOf(int)
    assert Primitive(PrimitiveKind.STRING) == STRING


# ###############
# Enum descriptor
# ###############


def test_enum_contains_members_and_member_values() -> None:
    descriptor = EnumOf(Color)
    assert descriptor.contains(Color.RED)
    assert descriptor.contains("blue")
    assert not descriptor.contains("green")
    assert not descriptor.contains(None)


def test_int_enum_does_not_contain_bools() -> None:
    descriptor = EnumOf(Level)
    assert descriptor.contains(1)
    assert not descriptor.contains(True)


# ###############
# Union descriptor
# ###############


def test_union_mapping_accepts_dict_and_normalizes_variants() -> None:
    descriptor = UnionOf(Point, Label, discriminator="kind", mapping={"point": Point})
    assert descriptor.variant_for("point") == ModelOf(Point)
    assert descriptor.variant_for("label") is None


def test_union_keeps_declaration_order() -> None:
    assert UnionOf(str, int).variants == (STRING, INT)
    assert UnionOf(int, str).variants == (INT, STRING)
