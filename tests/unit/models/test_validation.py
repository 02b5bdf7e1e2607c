"""Tests for roots.models._validation shared helpers."""

from __future__ import annotations

import pytest

from roots.models._validation import (
    freeze_int_tuple,
    freeze_str_tuple,
    validate_instance,
    validate_int,
    validate_mapping,
)


class TestValidateInstance:
    def test_correct_type_passes(self) -> None:
        validate_instance("hello", str, "field")

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(TypeError, match="field must be a str, got int"):
            validate_instance(42, str, "field")

    def test_article_an_for_vowel(self) -> None:
        with pytest.raises(TypeError, match="field must be an int"):
            validate_instance("x", int, "field")


class TestValidateInt:
    @pytest.mark.parametrize("value", [0, -1, 2**63 - 1, -(2**63)])
    def test_any_int_accepted(self, value: int) -> None:
        validate_int(value, "n")

    @pytest.mark.parametrize(
        ("value", "type_name"), [(True, "bool"), (1.0, "float"), ("1", "str"), (None, "NoneType")]
    )
    def test_non_int_rejected(self, value: object, type_name: str) -> None:
        with pytest.raises(TypeError, match=f"n must be an int, got {type_name}"):
            validate_int(value, "n")


class TestValidateMapping:
    def test_dict_passes(self) -> None:
        validate_mapping({}, "m")

    def test_list_rejected(self) -> None:
        with pytest.raises(TypeError, match="m must be a Mapping, got list"):
            validate_mapping([], "m")


class TestFreezeStrTuple:
    def test_list_frozen(self) -> None:
        assert freeze_str_tuple(["a", "b"], "f") == ("a", "b")

    def test_tuple_kept(self) -> None:
        assert freeze_str_tuple(("a",), "f") == ("a",)

    def test_empty(self) -> None:
        assert freeze_str_tuple([], "f") == ()

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="f must be a list or tuple of str, got str"):
            freeze_str_tuple("ab", "f")

    def test_set_rejected(self) -> None:
        with pytest.raises(TypeError, match="got set"):
            freeze_str_tuple({"a"}, "f")

    def test_non_str_item_rejected(self) -> None:
        with pytest.raises(TypeError, match="f items must be str, got NoneType"):
            freeze_str_tuple(["a", None], "f")


class TestFreezeIntTuple:
    def test_list_frozen(self) -> None:
        assert freeze_int_tuple([1, 2], "k") == (1, 2)

    def test_bool_item_rejected(self) -> None:
        with pytest.raises(TypeError, match="k items must be an int, got bool"):
            freeze_int_tuple([False], "k")

    def test_non_sequence_rejected(self) -> None:
        with pytest.raises(TypeError, match="k must be a list or tuple of int, got int"):
            freeze_int_tuple(1, "k")
