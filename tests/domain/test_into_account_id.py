"""Tests for converting any account ID form into an owned AccountId."""

from __future__ import annotations

import pytest

from near_account_id.domain.account_id import AccountId
from near_account_id.domain.account_id_ref import AccountIdRef, AccountIdRefMut
from near_account_id.domain.errors import ParseAccountError
from near_account_id.domain.into_account_id import into_account_id


class TestIntoAccountId:
    def test_owned_is_returned_as_is(self) -> None:
        account = AccountId("bob.near")
        assert into_account_id(account) is account

    def test_view_is_promoted(self) -> None:
        view = AccountIdRef.new("bob.near")
        result = into_account_id(view)
        assert isinstance(result, AccountId)
        assert result == "bob.near"
        assert result.as_str() is view.as_str()

    def test_mutable_view_is_promoted(self) -> None:
        handle = AccountIdRefMut.new_mut(bytearray(b"bob.near"))
        assert into_account_id(handle) == AccountId("bob.near")

    def test_string_is_validated(self) -> None:
        assert into_account_id("bob.near") == "bob.near"
        with pytest.raises(ParseAccountError):
            into_account_id("Bob.near")

    def test_other_types_rejected(self) -> None:
        with pytest.raises(TypeError, match="int"):
            into_account_id(42)  # type: ignore[arg-type]
