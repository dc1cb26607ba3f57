# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lenient coercion of scalar wire values."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from dodopayments.core.types import UNSET, PrimitiveKind

# ###############
# Public Interface
# ###############


def coerce_primitive(kind: PrimitiveKind, raw: Any) -> Any:
    """Convert *raw* to *kind*, or return ``UNSET`` if it cannot be converted."""
    if kind is PrimitiveKind.STRING:
        return _to_string(raw)
    if kind is PrimitiveKind.INT:
        return _to_int(raw)
    if kind is PrimitiveKind.FLOAT:
        return _to_float(raw)
    if kind is PrimitiveKind.BOOL:
        return _to_bool(raw)
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        parsed = parse_datetime(raw)
        if parsed is not None:
            return parsed
    return UNSET


def parse_datetime(text: str) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning ``None`` if *text* is not one.

    ``datetime.fromisoformat`` is used rather than pydantic's datetime
    validation, which reads numeric strings as Unix timestamps.
    """
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_datetime(value: datetime) -> str:
    """Format *value* as ISO-8601, spelling the UTC offset as ``Z``."""
    text = value.isoformat()
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        text = text.removesuffix("+00:00") + "Z"
    return text


# ################
# Implementation
# ################


def _to_string(raw: Any) -> Any:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return UNSET


def _to_int(raw: Any) -> Any:
    if isinstance(raw, bool):
        return UNSET
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            return UNSET
    return UNSET


def _to_float(raw: Any) -> Any:
    if isinstance(raw, bool):
        return UNSET
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return UNSET
    return UNSET


def _to_bool(raw: Any) -> Any:
    if isinstance(raw, bool):
        return raw
    if raw == "true":
        return True
    if raw == "false":
        return False
    return UNSET
