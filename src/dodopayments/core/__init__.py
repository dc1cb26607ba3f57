# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Model conversion engine: type descriptors, field registry, coercion and dump."""

from dodopayments.core.conversion import coerce, dump, dump_unknown, dumps, loads
from dodopayments.core.model import SdkEnum, SdkModel, SdkParams, SdkUnion
from dodopayments.core.registry import ApiField, FieldInfo, ModelInfo, api, introspect, model_info
from dodopayments.core.types import (
    BOOL,
    DATETIME,
    FLOAT,
    INT,
    STRING,
    UNSET,
    Descriptor,
    EnumOf,
    ListOf,
    MapOf,
    ModelOf,
    Primitive,
    PrimitiveKind,
    UnionOf,
    descriptor_for,
)
from dodopayments.core.unions import matches, resolve_coerce, resolve_dump

__all__ = [
    # Descriptors
    "BOOL",
    "DATETIME",
    "Descriptor",
    "EnumOf",
    "FLOAT",
    "INT",
    "ListOf",
    "MapOf",
    "ModelOf",
    "Primitive",
    "PrimitiveKind",
    "STRING",
    "UNSET",
    "UnionOf",
    "descriptor_for",
    # Registry
    "ApiField",
    "FieldInfo",
    "ModelInfo",
    "api",
    "introspect",
    "model_info",
    # Models
    "SdkEnum",
    "SdkModel",
    "SdkParams",
    "SdkUnion",
    # Conversion
    "coerce",
    "dump",
    "dump_unknown",
    "dumps",
    "loads",
    "matches",
    "resolve_coerce",
    "resolve_dump",
]
