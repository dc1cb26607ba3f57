# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Variant selection for union-typed values.

When coercing, candidates are tested in declaration order with cheap, shallow
structural predicates and the first compatible one wins. When dumping, the
value is already typed, so its runtime type picks the variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from dodopayments.core.primitives import parse_datetime
from dodopayments.core.registry import model_info
from dodopayments.core.types import (
    Descriptor,
    EnumOf,
    ListOf,
    MapOf,
    ModelOf,
    Primitive,
    PrimitiveKind,
    UnionOf,
)

# ###############
# Public Interface
# ###############


def resolve_coerce(union: UnionOf, raw: Any) -> Descriptor | None:
    """Select the variant used to coerce the wire value *raw*.

    A discriminator value present in the union's mapping selects its variant
    directly. Otherwise the first variant in declaration order that
    :func:`matches` *raw* is returned, or ``None`` if there is none.
    """
    if union.discriminator is not None and isinstance(raw, Mapping):
        variant = union.variant_for(raw.get(union.discriminator))
        if variant is not None:
            return variant
    for variant in union.variants:
        if matches(variant, raw):
            return variant
    return None


def resolve_dump(union: UnionOf, value: Any) -> Descriptor | None:
    """Select the variant whose type is the runtime type of the typed *value*."""
    for variant in union.variants:
        if _holds(variant, value):
            return variant
    return None


def matches(descriptor: Descriptor, raw: Any) -> bool:
    """Return True if *raw* is shaped like a value of *descriptor*.

    A model matches a mapping holding every required field's wire name with a
    plausible value; the values themselves are not inspected any deeper.
    """
    if isinstance(descriptor, ModelOf):
        if isinstance(raw, descriptor.model_type):
            return True
        if not isinstance(raw, Mapping):
            return False
        for field in model_info(descriptor.model_type).fields:
            if field.optional:
                continue
            if field.wire_name not in raw:
                return False
            value = raw[field.wire_name]
            if value is None:
                if not field.nullable:
                    return False
            elif not _plausible(field.descriptor, value):
                return False
        return True
    if isinstance(descriptor, UnionOf):
        return resolve_coerce(descriptor, raw) is not None
    return _plausible(descriptor, raw)


# ################
# Implementation
# ################


def _plausible(descriptor: Descriptor, raw: Any) -> bool:
    """Shallow shape check of a wire value against a descriptor."""
    if isinstance(descriptor, Primitive):
        return _scalar_kind_matches(descriptor.primitive, raw)
    if isinstance(descriptor, EnumOf):
        return _enum_plausible(descriptor, raw)
    if isinstance(descriptor, ListOf):
        return isinstance(raw, (list, tuple))
    if isinstance(descriptor, (MapOf, ModelOf)):
        return isinstance(raw, Mapping)
    # UnionOf is the only remaining variant.
    assert isinstance(descriptor, UnionOf)
    return any(_plausible(v, raw) for v in descriptor.variants)


def _enum_plausible(descriptor: EnumOf, raw: Any) -> bool:
    """Shape check for enum values.

    A single-member enum is a type tag and requires its one value. Larger sets
    accept any scalar of their members' type, so values added to the set later
    still match.
    """
    if descriptor.contains(raw):
        return True
    members = list(descriptor.enum_type)
    if len(members) == 1 or isinstance(raw, bool):
        return False
    return any(isinstance(raw, type(member.value)) for member in members)


def _scalar_kind_matches(kind: PrimitiveKind, raw: Any) -> bool:
    if kind is PrimitiveKind.BOOL:
        return isinstance(raw, bool)
    if isinstance(raw, bool):
        return False
    if kind is PrimitiveKind.STRING:
        return isinstance(raw, str)
    if kind is PrimitiveKind.INT:
        return isinstance(raw, int)
    if kind is PrimitiveKind.FLOAT:
        return isinstance(raw, (int, float))
    # DATETIME accepts only strings that actually parse.
    return isinstance(raw, datetime) or (isinstance(raw, str) and parse_datetime(raw) is not None)


def _holds(descriptor: Descriptor, value: Any) -> bool:
    """Return True if the typed *value* is an instance of *descriptor*'s type."""
    if isinstance(descriptor, ModelOf):
        return type(value) is descriptor.model_type
    if isinstance(descriptor, EnumOf):
        return descriptor.contains(value)
    if isinstance(descriptor, ListOf):
        return isinstance(value, (list, tuple))
    if isinstance(descriptor, MapOf):
        return isinstance(value, Mapping)
    if isinstance(descriptor, UnionOf):
        return resolve_dump(descriptor, value) is not None
    kind = descriptor.primitive
    if kind is PrimitiveKind.DATETIME:
        return isinstance(value, datetime)
    if kind is PrimitiveKind.BOOL:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if kind is PrimitiveKind.INT:
        return isinstance(value, int)
    if kind is PrimitiveKind.FLOAT:
        return isinstance(value, float)
    return isinstance(value, str)
