# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for union variant selection."""

from datetime import UTC, datetime
from enum import Enum

from dodopayments.core.model import SdkModel
from dodopayments.core.registry import api
from dodopayments.core.types import BOOL, DATETIME, FLOAT, INT, STRING, EnumOf, ListOf, MapOf, ModelOf, UnionOf
from dodopayments.core.unions import matches, resolve_coerce, resolve_dump

# ###############
# Helpers
# ###############


class Kind(str, Enum):
    CARD = "card"
    WALLET = "wallet"


class CardMethod(SdkModel):
    kind = api(enum=Kind)
    last_four = api(str)


class WalletMethod(SdkModel):
    kind = api(enum=Kind)
    provider = api(str, nullable=True)
    label = api(str, optional=True)


class Empty(SdkModel):
    note = api(str, optional=True)


class Tag(str, Enum):
    TAGGED = "tagged"


class TaggedCard(SdkModel):
    tag = api(enum=Tag)
    kind = api(enum=Kind)


# ###############
# matches
# ###############


def test_model_matches_when_required_keys_are_present() -> None:
    assert matches(ModelOf(CardMethod), {"kind": "card", "last_four": "4242"})


def test_model_does_not_match_when_a_required_key_is_missing() -> None:
    assert not matches(ModelOf(CardMethod), {"kind": "card"})


def test_model_ignores_optional_keys() -> None:
    assert matches(ModelOf(WalletMethod), {"kind": "wallet", "provider": "paypal"})


def test_null_only_matches_nullable_fields() -> None:
    assert matches(ModelOf(WalletMethod), {"kind": "wallet", "provider": None})
    assert not matches(ModelOf(CardMethod), {"kind": "card", "last_four": None})


def test_enum_field_accepts_values_outside_the_set() -> None:
    """New server-side enum values must not stop a variant from matching."""
    assert matches(ModelOf(CardMethod), {"kind": "bank", "last_four": "4242"})
    assert not matches(ModelOf(CardMethod), {"kind": 7.5, "last_four": "4242"})
    assert not matches(ModelOf(CardMethod), {"kind": True, "last_four": "4242"})


def test_single_member_enum_field_requires_its_value() -> None:
    assert matches(ModelOf(TaggedCard), {"tag": "tagged", "kind": "crypto"})
    assert not matches(ModelOf(TaggedCard), {"tag": "other", "kind": "card"})


def test_field_values_must_have_the_right_shape() -> None:
    assert not matches(ModelOf(CardMethod), {"kind": "card", "last_four": 4242})


def test_model_without_required_fields_matches_any_mapping() -> None:
    assert matches(ModelOf(Empty), {})
    assert not matches(ModelOf(Empty), [])


def test_model_instance_matches_its_own_type() -> None:
    assert matches(ModelOf(Empty), Empty())


def test_scalar_shapes() -> None:
    assert matches(STRING, "x")
    assert not matches(STRING, 1)
    assert matches(INT, 1)
    assert not matches(INT, True)
    assert matches(FLOAT, 1)
    assert matches(BOOL, False)
    assert matches(DATETIME, "2024-01-01T00:00:00Z")
    assert not matches(DATETIME, "not a date")


def test_container_shapes() -> None:
    assert matches(ListOf(int), [])
    assert not matches(ListOf(int), {})
    assert matches(MapOf(int), {})
    assert matches(EnumOf(Kind), "card")
    assert matches(EnumOf(Kind), "cash")
    assert not matches(EnumOf(Kind), 1)
    assert not matches(EnumOf(Tag), "cash")


# ###############
# resolve_coerce
# ###############


def test_first_compatible_variant_wins() -> None:
    union = UnionOf(str, int)
    assert resolve_coerce(union, 5) == INT
    assert resolve_coerce(union, "5") == STRING


def test_declaration_order_breaks_ties() -> None:
    raw = {"kind": "card", "last_four": "4242", "provider": "visa"}
    assert resolve_coerce(UnionOf(CardMethod, WalletMethod), raw) == ModelOf(CardMethod)
    assert resolve_coerce(UnionOf(WalletMethod, CardMethod), raw) == ModelOf(WalletMethod)


def test_discriminator_selects_mapped_variant() -> None:
    union = UnionOf(
        CardMethod,
        WalletMethod,
        discriminator="kind",
        mapping={"card": CardMethod, "wallet": WalletMethod},
    )
    # Incomplete for WalletMethod, but the discriminator decides.
    assert resolve_coerce(union, {"kind": "wallet"}) == ModelOf(WalletMethod)


def test_unmapped_discriminator_falls_back_to_order() -> None:
    union = UnionOf(CardMethod, WalletMethod, discriminator="kind", mapping={"card": CardMethod})
    raw = {"kind": "wallet", "provider": "paypal"}
    assert resolve_coerce(union, raw) == ModelOf(WalletMethod)


def test_no_compatible_variant_returns_none() -> None:
    assert resolve_coerce(UnionOf(CardMethod, WalletMethod), {"other": 1}) is None


def test_nested_union_variant() -> None:
    union = UnionOf(UnionOf(bool, int), str)
    assert resolve_coerce(union, 3) == UnionOf(bool, int)


# ###############
# resolve_dump
# ###############


def test_dump_selects_the_exact_runtime_type() -> None:
    union = UnionOf(CardMethod, WalletMethod)
    wallet = WalletMethod(kind=Kind.WALLET, provider="paypal")
    assert resolve_dump(union, wallet) == ModelOf(WalletMethod)


def test_dump_distinguishes_bool_from_int() -> None:
    union = UnionOf(int, bool)
    assert resolve_dump(union, True) == BOOL
    assert resolve_dump(union, 1) == INT


def test_dump_of_datetime_and_strings() -> None:
    union = UnionOf(str, datetime)
    assert resolve_dump(union, datetime(2024, 1, 1, tzinfo=UTC)) == DATETIME
    assert resolve_dump(union, "2024-01-01") == STRING


def test_dump_without_a_matching_type_returns_none() -> None:
    assert resolve_dump(UnionOf(CardMethod), {"kind": "card"}) is None
