# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SDK model, enum, union and params base classes."""

import pytest

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams, SdkUnion
from dodopayments.core.registry import api
from dodopayments.core.types import UNSET, EnumOf, ListOf, UnionOf
from dodopayments.request_options import RequestOptions

# ###############
# Helpers
# ###############


class Plan(str, SdkEnum):
    BASIC = "basic"
    PREMIUM = "premium"


class Member(SdkModel):
    memberId = api(str)
    plan = api(enum=Plan)
    nickname = api(str, optional=True, nullable=True)
    roles = api(ListOf(str), optional=True)


class MemberParams(SdkParams):
    memberId = api(str)
    nickname = api(str, optional=True, nullable=True)


class MemberOrId(SdkUnion):
    variants = (Member, str)


# ###############
# SdkModel
# ###############


def test_constructor_sets_fields() -> None:
    member = Member(memberId="m_1", plan=Plan.BASIC)
    assert member.memberId == "m_1"
    assert member.plan is Plan.BASIC
    assert member.fields_set == frozenset({"memberId", "plan"})


def test_constructor_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="unexpected field 'email'"):
        Member(memberId="m_1", email="a@b.c")


def test_unset_reads_as_none_but_is_not_set() -> None:
    member = Member(memberId="m_1", nickname=UNSET)
    assert member.nickname is None
    assert not member.is_set("nickname")


def test_explicit_none_is_set() -> None:
    member = Member(memberId="m_1", nickname=None)
    assert member.is_set("nickname")
    assert member.to_dict() == {"member_id": "m_1", "nickname": None}


def test_deleting_a_field_unsets_it() -> None:
    member = Member(memberId="m_1", nickname="bob")
    del member.nickname
    assert not member.is_set("nickname")


def test_from_dict_coerces_a_mapping() -> None:
    member = Member.from_dict({"member_id": "m_1", "plan": "premium", "roles": ["admin"]})
    assert member.plan == Plan.PREMIUM
    assert member.roles == ["admin"]


def test_from_dict_rejects_non_mappings() -> None:
    with pytest.raises(TypeError, match="expects a mapping, got list"):
        Member.from_dict([])  # type: ignore[arg-type]


def test_to_json_is_indented_by_default() -> None:
    member = Member(memberId="m_1")
    assert member.to_json() == '{\n  "member_id": "m_1"\n}'
    assert str(member) == member.to_json()
    assert member.to_json(indent=None) == '{"member_id":"m_1"}'


def test_copy_with_applies_changes_to_an_independent_copy() -> None:
    original = Member(memberId="m_1", roles=["admin"])
    clone = original.copy_with(nickname="bob")

    clone.roles.append("owner")
    assert original.roles == ["admin"]
    assert not original.is_set("nickname")
    assert clone.nickname == "bob"


def test_copy_with_unset_removes_the_field() -> None:
    clone = Member(memberId="m_1", nickname="bob").copy_with(nickname=UNSET)
    assert not clone.is_set("nickname")


def test_copy_with_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="copy_with"):
        Member(memberId="m_1").copy_with(unknown=1)


def test_copy_with_keeps_extras() -> None:
    member = Member.from_dict({"member_id": "m_1", "new_key": 1})
    assert member.copy_with(nickname="x").extra == {"new_key": 1}


def test_equality_compares_values_and_extras() -> None:
    assert Member(memberId="m_1") == Member(memberId="m_1")
    assert Member(memberId="m_1") != Member(memberId="m_2")
    assert Member(memberId="m_1") != Member(memberId="m_1", nickname=None)
    assert Member.from_dict({"member_id": "m_1", "x": 1}) != Member(memberId="m_1")


def test_models_of_different_types_are_not_equal() -> None:
    assert Member(memberId="m_1") != MemberParams(memberId="m_1")


def test_models_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Member(memberId="m_1"))


def test_repr_lists_set_fields_and_extras() -> None:
    member = Member.from_dict({"member_id": "m_1", "region": "eu"})
    assert repr(member) == "Member(memberId='m_1', region='eu')"


# ###############
# SdkEnum and SdkUnion
# ###############


def test_enum_converter_and_members() -> None:
    assert Plan.converter() == EnumOf(Plan)
    assert Plan("basic") == "basic"


def test_union_converter() -> None:
    converter = MemberOrId.converter()
    assert isinstance(converter, UnionOf)
    assert len(converter.variants) == 2


# ###############
# SdkParams
# ###############


def test_parse_request_from_an_instance() -> None:
    body, options = MemberParams.parse_request(MemberParams(memberId="m_1", nickname=None))
    assert body == {"member_id": "m_1", "nickname": None}
    assert options == RequestOptions()


def test_parse_request_from_a_mapping() -> None:
    body, options = MemberParams.parse_request({"member_id": "m_1", "nickname": UNSET}, {"max_retries": 5})
    assert body == {"member_id": "m_1"}
    assert options.max_retries == 5


def test_parse_request_without_params() -> None:
    body, _ = MemberParams.parse_request(None)
    assert body == {}


def test_parse_request_rejects_unknown_options() -> None:
    with pytest.raises(TypeError, match="Unknown request options: retries"):
        MemberParams.parse_request(None, {"retries": 1})
