# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for per-request options."""

import pytest

from dodopayments import RequestOptions


def test_parse_none_gives_defaults() -> None:
    options = RequestOptions.parse(None)
    assert options == RequestOptions()
    assert options.timeout == 60.0
    assert options.max_retries == 2


def test_parse_mapping_skips_none_values() -> None:
    options = RequestOptions.parse({"timeout": 5, "max_retries": None})
    assert options.timeout == 5
    assert options.max_retries == 2


def test_parse_returns_instances_unchanged() -> None:
    options = RequestOptions(timeout=1.0)
    assert RequestOptions.parse(options) is options


def test_parse_rejects_unknown_names() -> None:
    with pytest.raises(TypeError, match="Unknown request options: retry"):
        RequestOptions.parse({"retry": 1})


def test_merge_mapping_overrides_only_given_keys() -> None:
    base = RequestOptions(timeout=30.0, max_retries=5)
    merged = base.merge({"max_retries": 0})
    assert merged.timeout == 30.0
    assert merged.max_retries == 0


def test_merge_instance_overrides_non_default_values() -> None:
    base = RequestOptions(timeout=30.0, max_retries=5)
    merged = base.merge(RequestOptions(timeout=2.0))
    assert merged.timeout == 2.0
    assert merged.max_retries == 5


def test_merge_combines_extra_mappings() -> None:
    base = RequestOptions(extra_headers={"X-A": "1", "X-B": "1"})
    merged = base.merge({"extra_headers": {"X-B": "2"}})
    assert merged.extra_headers == {"X-A": "1", "X-B": "2"}
    assert base.extra_headers == {"X-A": "1", "X-B": "1"}


def test_merge_none_copies() -> None:
    base = RequestOptions(extra_query={"a": 1})
    merged = base.merge(None)
    merged.extra_query["b"] = 2
    assert base.extra_query == {"a": 1}


def test_merge_instance_can_restore_default_values() -> None:
    base = RequestOptions(timeout=10.0, max_retries=0)
    merged = base.merge(RequestOptions(timeout=60.0, max_retries=2))
    assert merged.timeout == 60.0
    assert merged.max_retries == 2


def test_given_names_only_the_passed_options() -> None:
    assert RequestOptions().given == frozenset()
    assert RequestOptions(max_retries=2).given == {"max_retries"}
    assert RequestOptions.parse({"timeout": 5, "max_retries": None}).given == {"timeout"}


def test_merge_keeps_unset_options_of_the_base() -> None:
    base = RequestOptions(max_retry_delay=1.0)
    merged = base.merge(RequestOptions(initial_retry_delay=0.1))
    assert merged.max_retry_delay == 1.0
    assert merged.initial_retry_delay == 0.1
    assert merged.given == {"max_retry_delay", "initial_retry_delay"}
