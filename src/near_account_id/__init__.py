"""NEAR account ID primitive: validation, classification, and views.

Account ID rules:

- 2 to 64 characters.
- Parts separated by ``.``: ``alice.near``, ``app.stage.testnet``.
- Each part is lowercase alphanumerics, optionally joined by single ``-`` or
  ``_``: ``1_4m_n0t-al1c3.near``.
- No leading, trailing, or adjacent separators: ``_alice.``, ``a..near``,
  and ``not-_alice.near`` are all rejected.
- A 64-character lowercase hex ID is a NEAR-implicit account; ``0x`` plus
  40 lowercase hex characters is an ETH-implicit account, and ``0s`` plus 40
  lowercase hex characters is a NEAR-deterministic account.

Usage::

    from near_account_id import AccountId

    alice = AccountId("alice.near")
    AccountId("ƒelicia.near")  # raises ParseAccountError (ƒ is not f)
"""

from near_account_id.domain.account_id import AccountId
from near_account_id.domain.account_id_ref import AccountIdRef, AccountIdRefMut
from near_account_id.domain.errors import (
    InvalidAccountIdLiteral,
    ParseAccountError,
    ParseErrorKind,
)
from near_account_id.domain.into_account_id import IntoAccountId, into_account_id
from near_account_id.domain.types import AccountType
from near_account_id.domain.validation import MAX_LEN, MIN_LEN, is_valid, validate

__version__ = "1.1.3"

__all__ = [
    "MAX_LEN",
    "MIN_LEN",
    "AccountId",
    "AccountIdRef",
    "AccountIdRefMut",
    "AccountType",
    "IntoAccountId",
    "InvalidAccountIdLiteral",
    "ParseAccountError",
    "ParseErrorKind",
    "__version__",
    "into_account_id",
    "is_valid",
    "validate",
]
