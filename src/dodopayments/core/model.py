# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base classes for generated SDK models, enums, unions and request params."""

from __future__ import annotations

import copy
import functools
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar, TypeVar

from dodopayments.core.registry import FieldInfo, introspect, model_info
from dodopayments.core.types import UNSET, EnumOf, ModelOf, UnionOf
from dodopayments.request_options import RequestOptions

ModelT = TypeVar("ModelT", bound="SdkModel")

# ###############
# Public Interface
# ###############


class SdkModel:
    """A record of named, typed fields declared with :func:`~dodopayments.core.registry.api`.

    Every field is either unset, ``None``, or holds a value. Reading an unset
    field returns ``None``; use :meth:`is_set` to tell the two apart. Unset
    fields are left out of :meth:`to_dict`, ``None`` fields are kept.

    Wire keys that the class does not declare are preserved in :attr:`extra`
    and written back on dump.
    """

    def __init__(self, **fields: Any) -> None:
        info = model_info(type(self))
        self._values: dict[str, Any] = {}
        self._extra: dict[str, Any] = {}
        for name, value in fields.items():
            if name not in info.by_name:
                raise TypeError(f"{type(self).__name__}() got an unexpected field '{name}'")
            if value is not UNSET:
                self._values[name] = value

    @classmethod
    def converter(cls) -> ModelOf:
        return ModelOf(cls)

    @classmethod
    def introspect(cls) -> tuple[FieldInfo, ...]:
        """Return this model's field table, building it on first use."""
        return introspect(cls)

    @classmethod
    def construct_from(cls: type[ModelT], values: Mapping[str, Any], extra: Mapping[str, Any] | None = None) -> ModelT:
        """Build an instance from already-converted field values, skipping argument checks."""
        obj = cls.__new__(cls)
        obj._values = dict(values)
        obj._extra = dict(extra or {})
        return obj

    @classmethod
    def from_dict(cls: type[ModelT], data: Mapping[str, Any]) -> ModelT:
        """Coerce a decoded JSON object into an instance.

        Raises:
            TypeError: If *data* is not a mapping.
        """
        from dodopayments.core.conversion import coerce

        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__}.from_dict() expects a mapping, got {type(data).__name__}")
        return coerce(cls.converter(), data)

    def to_dict(self) -> dict[str, Any]:
        """Dump this instance into a JSON-ready dict keyed by wire names."""
        from dodopayments.core.conversion import dump

        return dump(self.converter(), self)

    def to_json(self, *, indent: int | None = 2) -> str:
        from dodopayments.core.conversion import dumps

        return dumps(self.converter(), self, indent=indent)

    def is_set(self, name: str) -> bool:
        """Return True if the field *name* holds a value, ``None`` included."""
        return name in self._values

    @property
    def fields_set(self) -> frozenset[str]:
        return frozenset(self._values)

    @property
    def extra(self) -> dict[str, Any]:
        """Undeclared wire keys received with this instance."""
        return self._extra

    def copy_with(self: ModelT, **changes: Any) -> ModelT:
        """Return an independent deep copy with *changes* applied.

        Passing ``UNSET`` for a field leaves it unset in the copy.
        """
        by_name = model_info(type(self)).by_name
        for name in changes:
            if name not in by_name:
                raise TypeError(f"{type(self).__name__}.copy_with() got an unexpected field '{name}'")
        clone = copy.deepcopy(self)
        for name, value in changes.items():
            if value is UNSET:
                clone._values.pop(name, None)
            else:
                clone._values[name] = copy.deepcopy(value)
        return clone

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, SdkModel)
        return self._values == other._values and self._extra == other._extra

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [f"{name}={value!r}" for name, value in self._values.items()]
        parts.extend(f"{key}={value!r}" for key, value in self._extra.items())
        return f"{type(self).__name__}({', '.join(parts)})"

    def __str__(self) -> str:
        return self.to_json()


class SdkEnum(Enum):
    """Base for closed constant sets.

    Domain enums mix in ``str`` or ``int`` so that raw wire values compare
    equal to members. Values outside the set are kept as plain scalars when
    decoding.
    """

    @classmethod
    def converter(cls) -> EnumOf:
        return EnumOf(cls)


class SdkUnion:
    """Base for union declarations.

    Subclasses list their candidates in ``variants``; the first compatible
    candidate in that order wins when decoding. A ``discriminator`` wire key
    and ``mapping`` from its values to variants select a variant directly.
    """

    variants: ClassVar[tuple[Any, ...]] = ()
    discriminator: ClassVar[str | None] = None
    mapping: ClassVar[Mapping[str, Any]] = {}

    @classmethod
    def converter(cls) -> UnionOf:
        return _union_converter(cls)


class SdkParams(SdkModel):
    """Base for request parameter models."""

    @classmethod
    def parse_request(
        cls,
        params: SdkParams | Mapping[str, Any] | None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> tuple[dict[str, Any], RequestOptions]:
        """Dump *params* into wire form and normalize *options*.

        *params* may be an instance or a mapping keyed by attribute or wire names;
        mapping entries equal to ``UNSET`` are omitted.
        """
        from dodopayments.core.conversion import dump

        dumped = {} if params is None else dump(cls.converter(), params)
        return dumped, RequestOptions.parse(options)


# ################
# Implementation
# ################


@functools.cache
def _union_converter(union_type: type[SdkUnion]) -> UnionOf:
    return UnionOf(
        *union_type.variants,
        discriminator=union_type.discriminator,
        mapping=dict(union_type.mapping),
    )
