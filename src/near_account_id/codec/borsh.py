"""Binary (borsh) codec for account IDs.

Layout: little-endian ``u32`` byte length followed by the UTF-8 bytes.

INVARIANT: decoding never trusts the payload. The text is always re-run
through the validator, so a decode fails exactly the way parsing would.
"""

from __future__ import annotations

import struct

from near_account_id.domain._base import AccountIdBase
from near_account_id.domain.account_id import AccountId

_LENGTH = struct.Struct("<I")


class BorshDecodeError(ValueError):
    """Raised for payloads that are not a well-framed UTF-8 string."""


def serialize(account_id: AccountIdBase) -> bytes:
    """Encode *account_id* as a length-prefixed UTF-8 string."""
    data = account_id.as_bytes()
    return _LENGTH.pack(len(data)) + data


def deserialize_from(
    data: bytes | bytearray | memoryview, offset: int = 0
) -> tuple[AccountId, int]:
    """Decode one account ID starting at *offset*.

    Returns:
        The decoded ID and the offset just past it.

    Raises:
        BorshDecodeError: If the buffer is truncated or not UTF-8.
        ParseAccountError: If the decoded text is not a valid account ID.
    """
    view = memoryview(data)
    if len(view) - offset < _LENGTH.size:
        raise BorshDecodeError(
            f"unexpected end of input: need {_LENGTH.size} bytes for the length prefix"
        )
    (length,) = _LENGTH.unpack_from(view, offset)
    start = offset + _LENGTH.size
    end = start + length
    if end > len(view):
        raise BorshDecodeError(
            f"unexpected end of input: length prefix is {length}, "
            f"only {len(view) - start} bytes remain"
        )
    try:
        text = bytes(view[start:end]).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BorshDecodeError(f"account ID is not valid UTF-8: {exc}") from exc
    return AccountId(text), end


def deserialize(data: bytes | bytearray | memoryview) -> AccountId:
    """Decode a buffer holding exactly one account ID.

    Raises:
        BorshDecodeError: If the buffer is malformed or has trailing bytes.
        ParseAccountError: If the decoded text is not a valid account ID.
    """
    account_id, end = deserialize_from(data)
    remaining = len(memoryview(data)) - end
    if remaining:
        raise BorshDecodeError(f"not all bytes read: {remaining} trailing bytes")
    return account_id
