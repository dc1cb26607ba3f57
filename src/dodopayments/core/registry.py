# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarative field tables for SDK models.

Each model class declares its fields as class attributes created with
:func:`api`. The first time a class takes part in construction, coercion or
dump, its declarations are resolved into an immutable tuple of
:class:`FieldInfo` and memoized for the life of the process.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic.alias_generators import to_snake

from dodopayments.core.types import UNSET, Descriptor, EnumOf, UnionOf, descriptor_for
from dodopayments.errors import RegistryError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class FieldInfo:
    """Resolved metadata for one model field.

    Attributes:
        name: Python attribute name.
        wire_name: Key used in JSON payloads.
        descriptor: How values of this field are coerced and dumped.
        nullable: The field may hold an explicit ``None``.
        optional: The field may be absent from payloads and instances.
        default: Value assigned on coercion when the key is absent.
    """

    name: str
    wire_name: str
    descriptor: Descriptor
    nullable: bool = False
    optional: bool = False
    default: Any = UNSET

    @property
    def required(self) -> bool:
        return not self.optional


@dataclass(frozen=True)
class ModelInfo:
    """The registry entry of one model class."""

    fields: tuple[FieldInfo, ...]
    by_name: Mapping[str, FieldInfo]
    by_wire: Mapping[str, FieldInfo]


class ApiField:
    """Class attribute declaring one model field.

    Instances act as data descriptors: reading an unset field yields ``None``,
    ``del`` returns the field to the unset state.
    """

    def __init__(
        self,
        type: Any = None,
        *,
        enum: Any = None,
        union: Any = None,
        wire_name: str | None = None,
        nullable: bool = False,
        optional: bool = False,
        default: Any = UNSET,
    ) -> None:
        self.type = type
        self.enum = enum
        self.union = union
        self.wire_name = wire_name
        self.nullable = nullable
        self.optional = optional
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        if value is UNSET:
            instance._values.pop(self.name, None)
        else:
            instance._values[self.name] = value

    def __delete__(self, instance: Any) -> None:
        instance._values.pop(self.name, None)


def api(
    type: Any = None,
    *,
    enum: Any = None,
    union: Any = None,
    wire_name: str | None = None,
    nullable: bool = False,
    optional: bool = False,
    default: Any = UNSET,
) -> Any:
    """Declare a model field.

    Exactly one of *type*, *enum* or *union* names the value's type source.
    The wire name defaults to the snake_case form of the attribute name.
    """
    return ApiField(
        type,
        enum=enum,
        union=union,
        wire_name=wire_name,
        nullable=nullable,
        optional=optional,
        default=default,
    )


def introspect(model_type: type) -> tuple[FieldInfo, ...]:
    """Return the field table of *model_type*, building it on first use."""
    return model_info(model_type).fields


def model_info(model_type: type) -> ModelInfo:
    """Return the memoized registry entry of *model_type*.

    Raises:
        RegistryError: If a field declaration of *model_type* is inconsistent.
    """
    entry = _registry.get(model_type)
    if entry is not None:
        return entry
    with _lock:
        entry = _registry.get(model_type)
        if entry is None:
            entry = _build_entry(model_type)
            _registry[model_type] = entry
            logger.debug("Registered %s with %d fields", model_type.__qualname__, len(entry.fields))
    return entry


# ################
# Implementation
# ################

_registry: dict[type, ModelInfo] = {}
_lock = threading.RLock()


def _declared_fields(model_type: type) -> dict[str, ApiField]:
    """Collect ApiField declarations across the MRO, base classes first."""
    declared: dict[str, ApiField] = {}
    for klass in reversed(model_type.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, ApiField):
                declared[name] = attr
    return declared


def _build_entry(model_type: type) -> ModelInfo:
    fields: list[FieldInfo] = []
    by_wire: dict[str, FieldInfo] = {}
    for name, declaration in _declared_fields(model_type).items():
        info = _resolve_field(model_type, name, declaration)
        if info.wire_name in by_wire:
            raise RegistryError(
                f"{model_type.__qualname__}: fields '{by_wire[info.wire_name].name}' and '{name}' "
                f"share the wire name '{info.wire_name}'"
            )
        by_wire[info.wire_name] = info
        fields.append(info)
    return ModelInfo(
        fields=tuple(fields),
        by_name=MappingProxyType({f.name: f for f in fields}),
        by_wire=MappingProxyType(by_wire),
    )


def _resolve_field(model_type: type, name: str, declaration: ApiField) -> FieldInfo:
    location = f"{model_type.__qualname__}.{name}"
    sources = [s for s in (declaration.type, declaration.enum, declaration.union) if s is not None]
    if len(sources) > 1:
        raise RegistryError(f"{location}: declares more than one of 'type', 'enum' and 'union'")
    if not sources:
        raise RegistryError(f"{location}: declares no type")

    try:
        descriptor = descriptor_for(sources[0])
    except RegistryError as exc:
        raise RegistryError(f"{location}: {exc}") from exc
    if declaration.enum is not None and not isinstance(descriptor, EnumOf):
        raise RegistryError(f"{location}: 'enum' must name an Enum class, got {declaration.enum!r}")
    if declaration.union is not None and not isinstance(descriptor, UnionOf):
        raise RegistryError(f"{location}: 'union' must name a union, got {declaration.union!r}")

    return FieldInfo(
        name=name,
        wire_name=declaration.wire_name or to_snake(name),
        descriptor=descriptor,
        nullable=declaration.nullable,
        optional=declaration.optional,
        default=declaration.default,
    )
