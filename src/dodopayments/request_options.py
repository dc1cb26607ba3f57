# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-request transport options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

# ###############
# Public Interface
# ###############

DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_INITIAL_RETRY_DELAY = 0.5
DEFAULT_MAX_RETRY_DELAY = 8.0


@dataclass
class RequestOptions:
    """Options controlling how one request is sent.

    Scalar options left as ``None`` take their default and are not treated as
    given, so merging these options onto others keeps the others' values.

    Attributes:
        timeout: Seconds before the request times out.
        max_retries: Retries after the first attempt for retryable failures.
        initial_retry_delay: Seconds before the first retry; doubled per attempt.
        max_retry_delay: Upper bound for the delay between retries.
        extra_headers: Headers added on top of the client's and the call's.
        extra_query: Query parameters merged into the call's.
        extra_body: Keys merged into a JSON object body.
    """

    timeout: float | None = None
    max_retries: int | None = None
    initial_retry_delay: float | None = None
    max_retry_delay: float | None = None
    extra_headers: dict[str, str] = field(default_factory=dict)
    extra_query: dict[str, Any] = field(default_factory=dict)
    extra_body: dict[str, Any] = field(default_factory=dict)
    given: frozenset[str] = field(default=frozenset(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.given = frozenset(name for name in _DEFAULTS if getattr(self, name) is not None)
        for name, default in _DEFAULTS.items():
            if getattr(self, name) is None:
                setattr(self, name, default)

    @classmethod
    def parse(cls, options: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
        """Build options from ``None``, a mapping of option names, or an instance.

        Raises:
            TypeError: If the mapping holds an unknown option name.
        """
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return options
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            raise TypeError(f"Unknown request options: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in options.items() if v is not None})

    def merge(self, other: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
        """Return a copy of these options overridden by what *other* explicitly gives.

        Scalar options of *other* override when given, even if equal to their
        default. Its extra mappings are merged key by key.
        """
        merged = self._copy()
        if other is None:
            return merged
        other = RequestOptions.parse(other)
        for name in other.given:
            setattr(merged, name, getattr(other, name))
        merged.given = self.given | other.given
        for name in _EXTRA_NAMES:
            setattr(merged, name, {**getattr(self, name), **getattr(other, name)})
        return merged

    def _copy(self) -> RequestOptions:
        clone = replace(
            self,
            extra_headers=dict(self.extra_headers),
            extra_query=dict(self.extra_query),
            extra_body=dict(self.extra_body),
        )
        clone.given = self.given
        return clone


# ################
# Implementation
# ################

_DEFAULTS: dict[str, Any] = {
    "timeout": DEFAULT_TIMEOUT,
    "max_retries": DEFAULT_MAX_RETRIES,
    "initial_retry_delay": DEFAULT_INITIAL_RETRY_DELAY,
    "max_retry_delay": DEFAULT_MAX_RETRY_DELAY,
}

_EXTRA_NAMES = ("extra_headers", "extra_query", "extra_body")

_OPTION_NAMES = frozenset(f.name for f in fields(RequestOptions) if f.init)
