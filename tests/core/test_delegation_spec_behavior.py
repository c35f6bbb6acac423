"""Behavior tests for the delegation specification model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from delegate_matcher.core.specification import DelegationSpec, format_call_arguments


def test_defaults_expect_no_arguments_and_no_alias():
    spec = DelegationSpec(delegating_method="deliver_mail")

    assert spec.target_accessor is None
    assert spec.alias_method is None
    assert spec.arguments == ()
    assert spec.keyword_arguments == {}
    assert spec.has_arguments is False


def test_method_on_target_defaults_to_delegating_method():
    spec = DelegationSpec(delegating_method="deliver_mail")

    assert spec.method_on_target == "deliver_mail"
    assert spec.replace(alias_method="deliver_with_haste").method_on_target == "deliver_with_haste"


def test_replace_returns_new_spec_and_keeps_original():
    spec = DelegationSpec(delegating_method="deliver_mail")

    updated = spec.replace(target_accessor="mailman", arguments=("221B Baker St.",))

    assert spec.target_accessor is None
    assert updated.target_accessor == "mailman"
    assert updated.delegating_method == "deliver_mail"
    assert updated.arguments == ("221B Baker St.",)


def test_spec_is_frozen():
    spec = DelegationSpec(delegating_method="deliver_mail")

    with pytest.raises(ValidationError):
        spec.target_accessor = "mailman"


def test_argument_values_are_kept_as_given():
    marker = object()

    spec = DelegationSpec(delegating_method="deliver_mail", arguments=(marker,), keyword_arguments={"x": marker})

    assert spec.arguments[0] is marker
    assert spec.keyword_arguments["x"] is marker


@pytest.mark.parametrize("name", ["", "deliver mail", "1st", "deliver-mail"])
def test_invalid_method_names_are_rejected(name):
    with pytest.raises(ValidationError):
        DelegationSpec(delegating_method=name)

    spec = DelegationSpec(delegating_method="deliver_mail")
    with pytest.raises(ValidationError):
        spec.replace(target_accessor=name)


def test_format_call_arguments_renders_positional_then_keyword():
    assert format_call_arguments(("221B Baker St.", 3), {"hastily": True}) == "('221B Baker St.', 3, hastily=True)"
    assert format_call_arguments((), {}) == "()"


def test_format_call_arguments_marks_single_positional_argument_as_tuple():
    assert format_call_arguments(("k",), {}) == "('k',)"
    assert format_call_arguments((), {"hastily": True}) == "(hastily=True)"
    assert format_call_arguments(("k",), {"hastily": True}) == "('k', hastily=True)"
