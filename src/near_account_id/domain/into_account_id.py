"""Accept account IDs in any form and return an owned :class:`AccountId`."""

from __future__ import annotations

from near_account_id.domain.account_id import AccountId
from near_account_id.domain.account_id_ref import AccountIdRef, AccountIdRefMut

IntoAccountId = AccountId | AccountIdRef | AccountIdRefMut | str


def into_account_id(value: IntoAccountId) -> AccountId:
    """Convert *value* into an owned :class:`AccountId`.

    Owned IDs are returned as-is, views are promoted without re-validation,
    and plain strings are validated.

    Raises:
        ParseAccountError: If *value* is a string that is not a valid ID.
        TypeError: For any other input type.
    """
    if isinstance(value, AccountId):
        return value
    if isinstance(value, (AccountIdRef, AccountIdRefMut)):
        return value.to_owned()
    if isinstance(value, str):
        return AccountId(value)
    raise TypeError(f"cannot convert {type(value).__name__} into an AccountId")
