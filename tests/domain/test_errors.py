"""Tests for the parse error taxonomy."""

from __future__ import annotations

import pytest

from near_account_id.domain.errors import (
    InvalidAccountIdLiteral,
    ParseAccountError,
    ParseErrorKind,
)


class TestParseErrorKind:
    def test_values(self) -> None:
        assert ParseErrorKind.TOO_LONG == "too_long"
        assert ParseErrorKind.TOO_SHORT == "too_short"
        assert ParseErrorKind.REDUNDANT_SEPARATOR == "redundant_separator"
        assert ParseErrorKind.INVALID_CHAR == "invalid_char"

    @pytest.mark.parametrize(
        ("kind", "predicate"),
        [
            (ParseErrorKind.TOO_LONG, "is_too_long"),
            (ParseErrorKind.TOO_SHORT, "is_too_short"),
            (ParseErrorKind.REDUNDANT_SEPARATOR, "is_redundant_separator"),
            (ParseErrorKind.INVALID_CHAR, "is_invalid_char"),
        ],
    )
    def test_exactly_one_predicate_holds(self, kind: ParseErrorKind, predicate: str) -> None:
        for other in ParseErrorKind:
            assert getattr(other, predicate)() is (other is kind)

    def test_descriptions(self) -> None:
        assert ParseErrorKind.TOO_LONG.description == "the Account ID is too long"
        assert ParseErrorKind.INVALID_CHAR.description == (
            "the Account ID contains an invalid character"
        )


class TestParseAccountError:
    def test_length_error_message(self) -> None:
        err = ParseAccountError(ParseErrorKind.TOO_SHORT)
        assert str(err) == "the Account ID is too short"
        assert err.char is None
        assert err.index is None

    def test_char_error_message(self) -> None:
        err = ParseAccountError(ParseErrorKind.INVALID_CHAR, (0, "ƒ"))
        assert str(err) == "the Account ID contains an invalid character 'ƒ' at index 0"
        assert err.index == 0

    def test_is_value_error(self) -> None:
        assert isinstance(ParseAccountError(ParseErrorKind.TOO_LONG), ValueError)

    def test_equality_by_kind_and_char(self) -> None:
        a = ParseAccountError(ParseErrorKind.REDUNDANT_SEPARATOR, (2, "_"))
        b = ParseAccountError(ParseErrorKind.REDUNDANT_SEPARATOR, (2, "_"))
        c = ParseAccountError(ParseErrorKind.REDUNDANT_SEPARATOR, (3, "_"))
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_repr(self) -> None:
        err = ParseAccountError(ParseErrorKind.INVALID_CHAR, (1, "@"))
        assert "INVALID_CHAR" in repr(err)
        assert "(1, '@')" in repr(err)


class TestInvalidAccountIdLiteral:
    def test_escapes_generic_exception_handlers(self) -> None:
        assert not issubclass(InvalidAccountIdLiteral, Exception)
        with pytest.raises(InvalidAccountIdLiteral):
            try:
                raise InvalidAccountIdLiteral("boom")
            except Exception:  # pragma: no cover - must not be reached
                pytest.fail("caught by except Exception")
