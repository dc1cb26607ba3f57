# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors driving the conversion between wire JSON and SDK models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from dodopayments.errors import RegistryError

# ###############
# Public Interface
# ###############


class _Unset:
    """Marker for a field that holds no value at all, as opposed to ``None``."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Unset:
        return self


UNSET: Any = _Unset()


class PrimitiveKind(Enum):
    """Scalar kinds understood by the conversion engine."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    DATETIME = "datetime"


class Primitive(BaseModel):
    """A scalar value of one primitive kind."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind

    def __init__(self, primitive: PrimitiveKind | str | None = None, /, **data: Any) -> None:
        if primitive is not None:
            data["primitive"] = primitive
        super().__init__(**data)


class ListOf(BaseModel):
    """An ordered sequence of elements sharing one descriptor."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    element: Descriptor
    nullable: bool = False

    def __init__(self, element: Any = None, /, **data: Any) -> None:
        if element is not None:
            data["element"] = element
        super().__init__(**data)

    @field_validator("element", mode="before")
    @classmethod
    def _normalize_element(cls, value: Any) -> Any:
        return descriptor_for(value)


class MapOf(BaseModel):
    """A string-keyed mapping whose values share one descriptor."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    element: Descriptor
    nullable: bool = False

    def __init__(self, element: Any = None, /, **data: Any) -> None:
        if element is not None:
            data["element"] = element
        super().__init__(**data)

    @field_validator("element", mode="before")
    @classmethod
    def _normalize_element(cls, value: Any) -> Any:
        return descriptor_for(value)


class EnumOf(BaseModel):
    """A closed set of scalar constants. Membership is advisory only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enum"] = "enum"
    enum_type: type[Enum]

    def __init__(self, enum_type: type[Enum] | None = None, /, **data: Any) -> None:
        if enum_type is not None:
            data["enum_type"] = enum_type
        super().__init__(**data)

    def contains(self, value: Any) -> bool:
        """Return True if *value* is a member, or the value of a member, of the set."""
        if isinstance(value, self.enum_type):
            return True
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return False
        return any(member.value == value for member in self.enum_type)


class ModelOf(BaseModel):
    """A structured record described by the field table of an SDK model class."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["model"] = "model"
    model_type: type[Any]

    def __init__(self, model_type: type[Any] | None = None, /, **data: Any) -> None:
        if model_type is not None:
            data["model_type"] = model_type
        super().__init__(**data)


class UnionOf(BaseModel):
    """Exactly one of several candidate descriptors, resolved per value.

    Attributes:
        variants: Candidates in declaration order; the first compatible one wins.
        discriminator: Optional wire key whose value selects a variant directly.
        mapping: Pairs of discriminator value and the variant it selects.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["union"] = "union"
    variants: tuple[Descriptor, ...]
    discriminator: str | None = None
    mapping: tuple[tuple[str, Descriptor], ...] = ()

    def __init__(self, *variants: Any, **data: Any) -> None:
        if variants:
            data["variants"] = variants
        super().__init__(**data)

    @field_validator("variants", mode="before")
    @classmethod
    def _normalize_variants(cls, value: Any) -> Any:
        return tuple(descriptor_for(v) for v in value)

    @field_validator("mapping", mode="before")
    @classmethod
    def _normalize_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = value.items()
        return tuple((key, descriptor_for(v)) for key, v in value)

    def variant_for(self, discriminator_value: Any) -> Descriptor | None:
        """Return the variant mapped to *discriminator_value*, if any."""
        for key, variant in self.mapping:
            if key == discriminator_value:
                return variant
        return None


# A descriptor: one of the primitive, container, enum, model, or union tags.
# The `kind` discriminator keeps validation of nested descriptors unambiguous.
Descriptor = Annotated[
    Primitive | ListOf | MapOf | EnumOf | ModelOf | UnionOf,
    _Field(discriminator="kind"),
]

STRING = Primitive(PrimitiveKind.STRING)
INT = Primitive(PrimitiveKind.INT)
FLOAT = Primitive(PrimitiveKind.FLOAT)
BOOL = Primitive(PrimitiveKind.BOOL)
DATETIME = Primitive(PrimitiveKind.DATETIME)


def descriptor_for(source: Any) -> Descriptor:
    """Normalize a declaration source into a descriptor.

    Accepts a descriptor instance, one of the builtin scalar types (``str``,
    ``int``, ``float``, ``bool``, ``datetime``), an ``Enum`` subclass, or any
    class exposing a ``converter()`` classmethod (SDK models and unions).

    Raises:
        RegistryError: If *source* cannot describe a value.
    """
    if isinstance(source, (Primitive, ListOf, MapOf, EnumOf, ModelOf, UnionOf)):
        return source
    if isinstance(source, type):
        if source in _BUILTIN_PRIMITIVES:
            return _BUILTIN_PRIMITIVES[source]
        if issubclass(source, Enum):
            return EnumOf(source)
        converter = getattr(source, "converter", None)
        if callable(converter):
            return converter()
    raise RegistryError(f"Cannot derive a type descriptor from {source!r}")


# ################
# Implementation
# ################

_BUILTIN_PRIMITIVES: dict[type, Primitive] = {
    str: STRING,
    int: INT,
    float: FLOAT,
    bool: BOOL,
    datetime: DATETIME,
}

# Resolve forward references for descriptors that nest other descriptors.
ListOf.model_rebuild()
MapOf.model_rebuild()
UnionOf.model_rebuild()
