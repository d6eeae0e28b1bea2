"""Hypothesis strategies producing valid account IDs.

Every strategy here is correct by construction: named IDs are composed of
labels that start and end with ``[a-z0-9]`` and never place two separators
next to each other, and implicit IDs are hex encodings of random bytes.

Usage::

    from hypothesis import given
    from near_account_id.arbitrary import account_ids

    @given(account_ids())
    def test_round_trip(account_id): ...

Requires the ``arbitrary`` extra (``pip install near-account-id[arbitrary]``).
"""

from __future__ import annotations

from collections.abc import Mapping

from hypothesis import strategies as st

from near_account_id.domain.account_id import AccountId
from near_account_id.domain.account_id_ref import AccountIdRef
from near_account_id.domain.errors import ParseAccountError
from near_account_id.domain.types import AccountType
from near_account_id.domain.validation import MAX_LEN, MIN_LEN

EDGE_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
NON_EDGE_ALPHABET = EDGE_ALPHABET + "-_"


@st.composite
def labels(draw: st.DrawFn, min_size: int = 1, max_size: int = MAX_LEN) -> str:
    """A single ``.``-free label such as ``b-o_w_e-n``."""
    length = draw(st.integers(min_value=min_size, max_value=max_size))
    first = draw(st.sampled_from(EDGE_ALPHABET))
    if length == 1:
        return first

    chars = [first]
    # '-' and '_' must be followed by an edge char
    last_not_edge = False
    for _ in range(length - 2):
        c = draw(st.sampled_from(EDGE_ALPHABET if last_not_edge else NON_EDGE_ALPHABET))
        last_not_edge = c in "-_"
        chars.append(c)
    chars.append(draw(st.sampled_from(EDGE_ALPHABET)))
    return "".join(chars)


def sub_account_ids(parent: AccountIdRef | AccountId | str) -> st.SearchStrategy[AccountId]:
    """Direct sub-accounts of *parent* that still fit within ``MAX_LEN``.

    Raises:
        ValueError: If *parent* leaves no room for ``<label>.``.
    """
    parent_text = str(parent)
    room = MAX_LEN - len(parent_text) - 1
    if room < 1:
        raise ValueError(f"parent {parent_text!r} is too long to have sub-accounts")
    return labels(max_size=room).map(lambda label: AccountId(f"{label}.{parent_text}"))


@st.composite
def named_account_ids(
    draw: st.DrawFn, parent: AccountIdRef | AccountId | str | None = None
) -> AccountId:
    """Named IDs: a top-level label, then zero or more sub-account levels."""
    if parent is None:
        account_id = AccountId(draw(labels(min_size=MIN_LEN)))
    else:
        account_id = draw(sub_account_ids(parent))

    # keep nesting while there is room for at least one char and a '.'
    while len(account_id) < MAX_LEN - 2 and draw(st.booleans()):
        account_id = draw(sub_account_ids(account_id))
    return account_id


def near_implicit_account_ids() -> st.SearchStrategy[AccountId]:
    """64 lowercase hex digits (a 32-byte public key)."""
    return st.binary(min_size=32, max_size=32).map(lambda pk: AccountId(pk.hex()))


def eth_implicit_account_ids() -> st.SearchStrategy[AccountId]:
    """``0x`` plus 40 lowercase hex digits (a 20-byte address)."""
    return st.binary(min_size=20, max_size=20).map(lambda h: AccountId(f"0x{h.hex()}"))


def near_deterministic_account_ids() -> st.SearchStrategy[AccountId]:
    """``0s`` plus 40 lowercase hex digits (a 20-byte state hash)."""
    return st.binary(min_size=20, max_size=20).map(lambda h: AccountId(f"0s{h.hex()}"))


_STRATEGIES = {
    AccountType.NAMED_ACCOUNT: named_account_ids,
    AccountType.NEAR_IMPLICIT_ACCOUNT: near_implicit_account_ids,
    AccountType.ETH_IMPLICIT_ACCOUNT: eth_implicit_account_ids,
    AccountType.NEAR_DETERMINISTIC_ACCOUNT: near_deterministic_account_ids,
}

DEFAULT_WEIGHTS: dict[AccountType, int] = {account_type: 1 for account_type in AccountType}


def account_ids(weights: Mapping[AccountType, int] | None = None) -> st.SearchStrategy[AccountId]:
    """Any valid account ID, mixing categories by integer *weights*.

    A category with weight 0 (or missing from *weights*) is never drawn.

    Raises:
        ValueError: If a weight is negative or every weight is zero.
    """
    weights = DEFAULT_WEIGHTS if weights is None else weights
    pool: list[AccountType] = []
    for account_type, weight in weights.items():
        if weight < 0:
            raise ValueError(f"weight for {account_type} must be >= 0, got {weight}")
        pool.extend([AccountType(account_type)] * weight)
    if not pool:
        raise ValueError("at least one account type needs a positive weight")
    return st.sampled_from(pool).flatmap(lambda account_type: _STRATEGIES[account_type]())


def shrink_to_valid_prefix(text: str) -> AccountIdRef | None:
    """Cut *text* at each reported error index until it parses.

    Returns None once an error carries no index (a length error) or the
    text runs out.
    """
    while True:
        try:
            return AccountIdRef.new(text)
        except ParseAccountError as exc:
            if exc.index is None:
                return None
            text = text[: exc.index]
