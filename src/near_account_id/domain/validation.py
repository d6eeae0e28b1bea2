"""Account ID grammar, validation, and shape predicates.

Account ID rules:
- Length is 2 to 64 bytes (UTF-8).
- Parts are separated by ``.``; inside a part, runs of ``[a-z0-9]`` may be
  joined by a single ``-`` or ``_``.
- No leading, trailing, or adjacent separators (``-``, ``_``, ``.``).

INVARIANT: :func:`validate` is the single source of truth for the grammar.
:func:`validate_literal` and :data:`ACCOUNT_ID_PATTERN` mirror it and are
tested against the same corpus.
"""

from __future__ import annotations

import re

from near_account_id.domain.errors import (
    InvalidAccountIdLiteral,
    ParseAccountError,
    ParseErrorKind,
)

MIN_LEN = 2
MAX_LEN = 64

SEPARATORS = frozenset("-_.")

# ECMA-262 syntax for JSON Schema consumers, where ``$`` only matches at the end.
ACCOUNT_ID_PATTERN = r"^(([a-z\d]+[-_])*[a-z\d]+\.)*([a-z\d]+[-_])*[a-z\d]+$"
# Python's ``$`` also matches before a trailing newline, so anchor on ``\Z``.
ACCOUNT_ID_REGEX = re.compile(ACCOUNT_ID_PATTERN.removesuffix("$") + r"\Z", re.ASCII)

_HEX_DIGITS = frozenset("0123456789abcdef")
_BODY_BYTES = frozenset(b"abcdefghijklmnopqrstuvwxyz0123456789")
_SEPARATOR_BYTES = frozenset(b"-_.")


def _is_body_char(c: str) -> bool:
    return ("a" <= c <= "z") or ("0" <= c <= "9")


def byte_length(account_id: str) -> int:
    """Length of *account_id* in UTF-8 bytes.

    Raises:
        TypeError: If *account_id* is not a ``str``.
    """
    if not isinstance(account_id, str):
        raise TypeError(f"account ID must be str, not {type(account_id).__name__}")
    if account_id.isascii():
        return len(account_id)
    return len(account_id.encode("utf-8"))


def check_length(length: int) -> None:
    """Raise ``TooShort``/``TooLong`` unless *length* bytes is in bounds."""
    if length < MIN_LEN:
        raise ParseAccountError(ParseErrorKind.TOO_SHORT)
    if length > MAX_LEN:
        raise ParseAccountError(ParseErrorKind.TOO_LONG)


def validate(account_id: str) -> None:
    """Check *account_id* against the grammar.

    Raises:
        ParseAccountError: On the first violation. Length is checked first;
            then a single left-to-right scan reports whichever of
            ``InvalidChar`` or ``RedundantSeparator`` it hits first; a
            trailing separator is reported last.

    Examples:
        ``validate("a__ƒƒluent.")`` reports the redundant ``_`` at index 2,
        because the scan reaches it before the first ``ƒ``.
    """
    check_length(byte_length(account_id))

    # Seeded as True so a leading separator fails like a redundant one.
    last_char_is_separator = True
    current: tuple[int, str] | None = None
    for i, c in enumerate(account_id):
        current = (i, c)
        if _is_body_char(c):
            current_char_is_separator = False
        elif c in SEPARATORS:
            current_char_is_separator = True
        else:
            raise ParseAccountError(ParseErrorKind.INVALID_CHAR, current)
        if current_char_is_separator and last_char_is_separator:
            raise ParseAccountError(ParseErrorKind.REDUNDANT_SEPARATOR, current)
        last_char_is_separator = current_char_is_separator

    if last_char_is_separator:
        raise ParseAccountError(ParseErrorKind.REDUNDANT_SEPARATOR, current)


def is_valid(account_id: str) -> bool:
    """Non-raising grammar predicate."""
    try:
        validate(account_id)
    except ParseAccountError:
        return False
    return True


def validate_literal(account_id: str) -> None:
    """Validate an account ID constant, aborting on failure.

    Byte-wise mirror of :func:`validate` for literals defined at import
    time (see ``AccountIdRef.new_or_panic``). There is nothing to recover
    from here, so failures raise :class:`InvalidAccountIdLiteral`.
    """
    if not isinstance(account_id, str):
        raise TypeError(f"account ID must be str, not {type(account_id).__name__}")
    data = account_id.encode("utf-8")
    if len(data) < MIN_LEN:
        raise InvalidAccountIdLiteral("NEAR Account ID is too short")
    if len(data) > MAX_LEN:
        raise InvalidAccountIdLiteral("NEAR Account ID is too long")

    current_char_is_separator = False
    for idx, byte in enumerate(data):
        if byte in _BODY_BYTES:
            current_char_is_separator = False
        elif byte in _SEPARATOR_BYTES:
            if current_char_is_separator:
                raise InvalidAccountIdLiteral(
                    "NEAR Account ID cannot contain redundant separator (-, _, .)"
                )
            if idx == 0:
                raise InvalidAccountIdLiteral(
                    "NEAR Account ID cannot start with char separator (-, _, .)"
                )
            current_char_is_separator = True
        else:
            raise InvalidAccountIdLiteral(
                "NEAR Account ID cannot contain invalid chars "
                "(only a-z, 0-9, -, _, and . are allowed)"
            )

    if current_char_is_separator:
        raise InvalidAccountIdLiteral("NEAR Account ID cannot end with char separator (-, _, .)")


# --- Shape predicates (no validation; operate on the raw text) ---


def _is_lower_hex(text: str) -> bool:
    return all(c in _HEX_DIGITS for c in text)


def is_eth_implicit(account_id: str) -> bool:
    """``0x`` followed by 40 lowercase hex digits (42 bytes)."""
    return (
        byte_length(account_id) == 42
        and account_id.startswith("0x")
        and _is_lower_hex(account_id[2:])
    )


def is_near_deterministic(account_id: str) -> bool:
    """``0s`` followed by 40 lowercase hex digits (42 bytes)."""
    return (
        byte_length(account_id) == 42
        and account_id.startswith("0s")
        and _is_lower_hex(account_id[2:])
    )


def is_near_implicit(account_id: str) -> bool:
    """Exactly 64 lowercase hex digits."""
    return byte_length(account_id) == 64 and _is_lower_hex(account_id)
