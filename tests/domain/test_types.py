"""Tests for the AccountType enum."""

import pytest

from near_account_id.domain.types import AccountType


def test_members_and_values() -> None:
    """AccountType is a StrEnum with the expected values."""
    assert {e.value for e in AccountType} == {
        "named",
        "near_implicit",
        "eth_implicit",
        "near_deterministic",
    }
    for member in AccountType:
        assert member == member.value
        assert isinstance(member, str)


@pytest.mark.parametrize(
    "account_type,implicit",
    [
        (AccountType.NAMED_ACCOUNT, False),
        (AccountType.NEAR_IMPLICIT_ACCOUNT, True),
        (AccountType.ETH_IMPLICIT_ACCOUNT, True),
        (AccountType.NEAR_DETERMINISTIC_ACCOUNT, True),
    ],
)
def test_is_implicit(account_type: AccountType, implicit: bool) -> None:
    assert account_type.is_implicit() is implicit
