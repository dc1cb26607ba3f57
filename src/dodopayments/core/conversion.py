# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between wire JSON values and typed SDK models.

:func:`coerce` walks a descriptor and turns decoded JSON into models; it never
raises on shape mismatches and hands back anything it does not understand
unchanged, so payloads from a newer API version still decode. :func:`dump` is
its inverse and produces values ready for ``json.dumps``.

Unset optional fields are omitted from dumped output, while fields explicitly
set to ``None`` are emitted as ``null``.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from dodopayments.core.model import SdkModel
from dodopayments.core.primitives import coerce_primitive, format_datetime
from dodopayments.core.registry import model_info
from dodopayments.core.types import (
    UNSET,
    Descriptor,
    EnumOf,
    ListOf,
    MapOf,
    ModelOf,
    Primitive,
    UnionOf,
    descriptor_for,
)
from dodopayments.core.unions import resolve_coerce, resolve_dump

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def coerce(descriptor: Any, raw: Any) -> Any:
    """Convert the decoded JSON value *raw* into the typed form of *descriptor*.

    Args:
        descriptor: A descriptor, or any source accepted by
            :func:`~dodopayments.core.types.descriptor_for` (a model class, an
            enum class, ``str``, ...).
        raw: A decoded JSON value. It is never mutated.

    Returns:
        The typed value, or *raw* itself where it does not fit *descriptor*.
    """
    descriptor = descriptor_for(descriptor)
    if raw is None:
        return None
    if isinstance(descriptor, Primitive):
        value = coerce_primitive(descriptor.primitive, raw)
        if value is UNSET:
            logger.debug("Passing through %r: not a %s", raw, descriptor.primitive.value)
            return raw
        return value
    if isinstance(descriptor, EnumOf):
        if not descriptor.contains(raw):
            logger.debug("Passing through %r: not a member of %s", raw, descriptor.enum_type.__name__)
        return raw
    if isinstance(descriptor, ListOf):
        return _coerce_list(descriptor, raw)
    if isinstance(descriptor, MapOf):
        return _coerce_map(descriptor, raw)
    if isinstance(descriptor, ModelOf):
        return _coerce_model(descriptor, raw)
    # UnionOf is the only remaining variant.
    assert isinstance(descriptor, UnionOf)
    variant = resolve_coerce(descriptor, raw)
    if variant is None:
        logger.debug("Passing through %r: no union variant matches", raw)
        return raw
    return coerce(variant, raw)


def dump(descriptor: Any, value: Any) -> Any:
    """Convert the typed *value* back into a JSON-ready value.

    Args:
        descriptor: The descriptor *value* was coerced with, or a source
            accepted by :func:`~dodopayments.core.types.descriptor_for`.
        value: A typed value; plain dicts and lists are accepted as well.

    Returns:
        A structure of dicts, lists and scalars.
    """
    descriptor = descriptor_for(descriptor)
    if value is None:
        return None
    if isinstance(descriptor, (Primitive, EnumOf)):
        return dump_unknown(value)
    if isinstance(descriptor, ListOf):
        if not isinstance(value, (list, tuple)):
            return dump_unknown(value)
        return [dump(descriptor.element, v) for v in value]
    if isinstance(descriptor, MapOf):
        if not isinstance(value, Mapping):
            return dump_unknown(value)
        return {k: dump(descriptor.element, v) for k, v in value.items()}
    if isinstance(descriptor, ModelOf):
        return _dump_model(descriptor, value)
    # UnionOf is the only remaining variant.
    assert isinstance(descriptor, UnionOf)
    variant = resolve_dump(descriptor, value)
    if variant is None:
        return dump_unknown(value)
    return dump(variant, value)


def dump_unknown(value: Any) -> Any:
    """Dump a value without a descriptor, using its runtime type alone."""
    if isinstance(value, SdkModel):
        return _dump_model(ModelOf(type(value)), value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (list, tuple)):
        return [dump_unknown(v) for v in value]
    if isinstance(value, Mapping):
        return {k: dump_unknown(v) for k, v in value.items()}
    return value


def loads(descriptor: Any, data: str | bytes) -> Any:
    """Decode the JSON document *data* and coerce it with *descriptor*."""
    return coerce(descriptor, json.loads(data))


def dumps(descriptor: Any, value: Any, *, indent: int | None = None) -> str:
    """Dump *value* with *descriptor* and encode the result as a JSON document."""
    separators = (",", ":") if indent is None else None
    return json.dumps(dump(descriptor, value), indent=indent, separators=separators, ensure_ascii=False)


# ################
# Implementation
# ################


def _coerce_list(descriptor: ListOf, raw: Any) -> Any:
    if not isinstance(raw, (list, tuple)):
        logger.debug("Passing through %r: not a list", raw)
        return raw
    result = []
    for item in raw:
        if item is None and descriptor.nullable:
            result.append(None)
        else:
            result.append(coerce(descriptor.element, item))
    return result


def _coerce_map(descriptor: MapOf, raw: Any) -> Any:
    if not isinstance(raw, Mapping):
        logger.debug("Passing through %r: not a mapping", raw)
        return raw
    result = {}
    for key, item in raw.items():
        if item is None and descriptor.nullable:
            result[key] = None
        else:
            result[key] = coerce(descriptor.element, item)
    return result


def _coerce_model(descriptor: ModelOf, raw: Any) -> Any:
    model_type = descriptor.model_type
    if isinstance(raw, model_type):
        return raw
    if not isinstance(raw, Mapping):
        logger.debug("Passing through %r: not a mapping for %s", raw, model_type.__name__)
        return raw

    info = model_info(model_type)
    values: dict[str, Any] = {}
    for field in info.fields:
        if field.wire_name not in raw:
            if field.default is not UNSET:
                values[field.name] = copy.deepcopy(field.default)
            continue
        item = raw[field.wire_name]
        if item is None and field.nullable:
            values[field.name] = None
        else:
            values[field.name] = coerce(field.descriptor, item)

    extra = {k: copy.deepcopy(v) for k, v in raw.items() if k not in info.by_wire}
    return model_type.construct_from(values, extra)


def _dump_model(descriptor: ModelOf, value: Any) -> Any:
    if isinstance(value, SdkModel):
        # A subclass instance dumps every field it declares, not only the base's.
        info = model_info(type(value))
        result: dict[str, Any] = {}
        for field in info.fields:
            if not value.is_set(field.name):
                continue
            item = getattr(value, field.name)
            result[field.wire_name] = None if item is None else dump(field.descriptor, item)
        for key, item in value.extra.items():
            result.setdefault(key, dump_unknown(item))
        return result
    if isinstance(value, Mapping):
        # Keys may be wire names or attribute names.
        info = model_info(descriptor.model_type)
        result = {}
        for key, item in value.items():
            if item is UNSET:
                continue
            field = info.by_wire.get(key) or info.by_name.get(key)
            if field is None:
                result[key] = dump_unknown(item)
            else:
                result[field.wire_name] = None if item is None else dump(field.descriptor, item)
        return result
    return dump_unknown(value)
