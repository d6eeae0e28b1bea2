"""Validation failure taxonomy.

A string is either wholly valid or rejected with exactly one
:class:`ParseAccountError`. The scan-level kinds carry the offending
code point and its index; the length kinds carry nothing.
"""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Kinds of account ID validation failures."""

    TOO_LONG = "too_long"
    TOO_SHORT = "too_short"
    REDUNDANT_SEPARATOR = "redundant_separator"
    INVALID_CHAR = "invalid_char"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def is_too_long(self) -> bool:
        return self is ParseErrorKind.TOO_LONG

    def is_too_short(self) -> bool:
        return self is ParseErrorKind.TOO_SHORT

    def is_redundant_separator(self) -> bool:
        return self is ParseErrorKind.REDUNDANT_SEPARATOR

    def is_invalid_char(self) -> bool:
        return self is ParseErrorKind.INVALID_CHAR


_DESCRIPTIONS: dict[ParseErrorKind, str] = {
    ParseErrorKind.TOO_LONG: "the Account ID is too long",
    ParseErrorKind.TOO_SHORT: "the Account ID is too short",
    ParseErrorKind.REDUNDANT_SEPARATOR: "the Account ID has a redundant separator",
    ParseErrorKind.INVALID_CHAR: "the Account ID contains an invalid character",
}


class ParseAccountError(ValueError):
    """Raised when a string is not a well-formed account ID.

    Attributes:
        kind: Which rule was violated.
        char: ``(index, code_point)`` of the character that tripped the
            rule, or None for length errors.
    """

    def __init__(self, kind: ParseErrorKind, char: tuple[int, str] | None = None) -> None:
        self.kind = kind
        self.char = char
        super().__init__(self._render())

    def _render(self) -> str:
        if self.char is None:
            return self.kind.description
        index, code_point = self.char
        return f"{self.kind.description} {code_point!r} at index {index}"

    @property
    def index(self) -> int | None:
        return self.char[0] if self.char is not None else None

    def __repr__(self) -> str:
        return f"ParseAccountError(kind={self.kind!r}, char={self.char!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseAccountError):
            return NotImplemented
        return self.kind == other.kind and self.char == other.char

    def __hash__(self) -> int:
        return hash((self.kind, self.char))


class InvalidAccountIdLiteral(BaseException):  # noqa: N818
    """Raised by the literal validator for malformed account ID constants.

    Derives from :class:`BaseException` so generic ``except Exception``
    handlers do not catch it: an invalid literal is a defect in the
    program, not a runtime condition.
    """
