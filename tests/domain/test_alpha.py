"""Tests for AlphaRule — letter-only matching with extra characters."""

from __future__ import annotations

import pytest

from fieldrules.domain.alpha import AlphaRule, strip_extra_characters
from fieldrules.domain.context import ValidationContext
from fieldrules.domain.messages import MessageCatalog
from fieldrules.domain.outcome import ErrorKind


class Unprintable:
    def __str__(self) -> str:
        raise ValueError("no text form")


class TestConstruction:
    def test_defaults(self) -> None:
        rule = AlphaRule()
        assert rule.extra_characters == ()
        assert rule.ignore_if_converted is False
        assert rule.error_message is None

    def test_ignore_if_converted_only(self) -> None:
        rule = AlphaRule(ignore_if_converted=True)
        assert rule.extra_characters == ()
        assert rule.ignore_if_converted is True

    def test_extra_characters_only(self) -> None:
        rule = AlphaRule("-", " ", "+")
        assert rule.extra_characters == ("-", " ", "+")
        assert rule.ignore_if_converted is False

    def test_fully_explicit(self) -> None:
        rule = AlphaRule("-", "-", ignore_if_converted=True)
        assert rule.extra_characters == ("-", "-")
        assert rule.ignore_if_converted is True

    def test_non_string_extra_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be strings"):
            AlphaRule("-", 1)  # type: ignore[arg-type]


class TestValidate:
    def test_none_is_success(self) -> None:
        assert AlphaRule().validate(None).ok
        assert AlphaRule("-").validate(None, ValidationContext(member_name="name")).ok

    @pytest.mark.parametrize("value", ["Hello", "a", "Z", "abcXYZ"])
    def test_letters_only(self, value: str) -> None:
        assert AlphaRule().validate(value).ok

    def test_digit_fails(self) -> None:
        outcome = AlphaRule().validate("Hello1")
        assert not outcome.ok
        assert outcome.kind == ErrorKind.CAN_ONLY_CONTAIN_LETTERS
        assert outcome.message == "The value can only contain letters."

    def test_non_ascii_letters_fail(self) -> None:
        outcome = AlphaRule().validate("Café")
        assert outcome.kind == ErrorKind.CAN_ONLY_CONTAIN_LETTERS

    def test_trailing_newline_fails(self) -> None:
        assert not AlphaRule().validate("Hello\n").ok

    def test_extras_are_stripped(self) -> None:
        assert AlphaRule("-", " ").validate("Mary - Jane").ok

    def test_empty_after_stripping_is_success(self) -> None:
        assert AlphaRule("-").validate("-").ok
        assert AlphaRule().validate("").ok

    def test_special_characters_failure(self) -> None:
        outcome = AlphaRule("$").validate("$100")
        assert not outcome.ok
        assert outcome.kind == ErrorKind.CAN_ONLY_CONTAIN_LETTERS_AND_SPECIAL_CHARACTERS
        assert outcome.message == (
            "The value can only contain letters and the following characters: $."
        )

    def test_extras_concatenated_without_separator(self) -> None:
        outcome = AlphaRule("-", " ", "+").validate("a1")
        assert outcome.message is not None
        assert outcome.message.endswith("following characters: - +.")

    def test_number_is_converted_and_checked(self) -> None:
        outcome = AlphaRule().validate(42)
        assert outcome.kind == ErrorKind.CAN_ONLY_CONTAIN_LETTERS

    def test_unprintable_value(self) -> None:
        context = ValidationContext(display_name="Nickname", member_name="nickname")
        outcome = AlphaRule().validate(Unprintable(), context)
        assert not outcome.ok
        assert outcome.kind == ErrorKind.VALUE_MUST_BE_STRING
        assert outcome.message == "Nickname must be a string."
        assert outcome.member_names == ()

    def test_undecodable_bytes(self) -> None:
        outcome = AlphaRule().validate(b"\xff\xfe")
        assert outcome.kind == ErrorKind.VALUE_MUST_BE_STRING

    def test_idempotent(self) -> None:
        rule = AlphaRule("-")
        assert rule.validate("a-1") == rule.validate("a-1")


class TestSequentialStripping:
    def test_order_matters(self) -> None:
        assert strip_extra_characters("aab", ("a", "ab")) == "b"
        assert strip_extra_characters("aab", ("ab", "a")) == ""

    def test_multi_character_entry_is_literal(self) -> None:
        assert strip_extra_characters("abba", ("ab",)) == "ba"

    def test_rule_uses_sequential_stripping(self) -> None:
        # "a" goes first, leaving "b1"; "ab" never matches
        outcome = AlphaRule("a", "ab").validate("aab1")
        assert not outcome.ok
        assert AlphaRule("ab").validate("abab").ok


class TestContext:
    def test_default_display_name(self) -> None:
        outcome = AlphaRule().validate("x1")
        assert outcome.message is not None
        assert outcome.message.startswith("The value ")
        assert outcome.member_names == (None,)

    def test_member_name_reported(self) -> None:
        context = ValidationContext(display_name="First name", member_name="first_name")
        outcome = AlphaRule().validate("x1", context)
        assert outcome.member_names == ("first_name",)
        assert outcome.message == "First name can only contain letters."


class TestLastMessage:
    def test_failure_records_message(self) -> None:
        rule = AlphaRule()
        outcome = rule.validate("x1")
        assert rule.error_message == outcome.message

    def test_success_keeps_previous_message(self) -> None:
        rule = AlphaRule()
        rule.validate("x1")
        rule.validate("ok")
        assert rule.error_message == "The value can only contain letters."

    def test_conversion_failure_records_message(self) -> None:
        rule = AlphaRule()
        rule.validate(Unprintable())
        assert rule.error_message == "The value must be a string."


class TestIgnoreIfConverted:
    def test_converted_value_skipped(self) -> None:
        rule = AlphaRule(ignore_if_converted=True)
        context = ValidationContext(member_name="age", converted=True)
        assert rule.validate(123, context).ok
        assert rule.error_message is None

    def test_unconverted_value_checked(self) -> None:
        rule = AlphaRule(ignore_if_converted=True)
        context = ValidationContext(member_name="age", converted=False)
        assert not rule.validate(123, context).ok

    def test_flag_off_checks_converted_value(self) -> None:
        context = ValidationContext(member_name="age", converted=True)
        assert not AlphaRule().validate(123, context).ok


class TestCatalog:
    def test_custom_catalog(self) -> None:
        catalog = MessageCatalog(can_only_contain_letters="{0}: letters only")
        outcome = AlphaRule(catalog=catalog).validate("x1")
        assert outcome.message == "The value: letters only"

    def test_repr(self) -> None:
        assert repr(AlphaRule("-")) == (
            "AlphaRule(extra_characters=('-',), ignore_if_converted=False)"
        )
