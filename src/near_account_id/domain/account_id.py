"""Owned account ID.

INVARIANT: every :class:`AccountId` holds text that passed
:func:`~near_account_id.domain.validation.validate`. The only exception is
:meth:`AccountId.new_unvalidated`, which is disabled unless the
``NEAR_ACCOUNT_ID_INTERNAL_UNSTABLE`` environment flag is set.
"""

from __future__ import annotations

import os
import warnings

from near_account_id.domain import validation
from near_account_id.domain._base import AccountIdBase
from near_account_id.domain.account_id_ref import AccountIdRef

INTERNAL_UNSTABLE_ENV_VAR = "NEAR_ACCOUNT_ID_INTERNAL_UNSTABLE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def internal_unstable_enabled() -> bool:
    """Whether the unvalidated construction path is switched on."""
    return os.environ.get(INTERNAL_UNSTABLE_ENV_VAR, "").strip().lower() in _TRUTHY


class AccountId(AccountIdBase):
    """NEAR account identifier.

    A unique, syntactically valid, human-readable account identifier on the
    NEAR network. Construction validates; instances are immutable and
    compare equal to views and plain strings with the same text.

    Examples:
        >>> alice = AccountId("alice.near")
        >>> alice == "alice.near"
        True
        >>> AccountId("ƒelicia.near")  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        near_account_id...ParseAccountError: ... 'ƒ' at index 0
    """

    __slots__ = ()

    def __init__(self, account_id: str) -> None:
        if isinstance(account_id, AccountIdBase):
            account_id = account_id.as_str()
        else:
            validation.validate(account_id)
        self._set_value(account_id)

    @classmethod
    def parse(cls, account_id: str) -> AccountId:
        """Validate *account_id* and take it without copying.

        Raises:
            ParseAccountError: If the text is not a valid account ID.
        """
        return cls(account_id)

    @staticmethod
    def validate(account_id: str) -> None:
        """Check *account_id* without constructing an instance.

        If the text has several violations, the first one met in scan
        order is reported: ``"a__ƒƒluent."`` is a redundant separator
        at index 2, while ``"aƒƒluent."`` is an invalid char at index 1.
        """
        validation.validate(account_id)

    @classmethod
    def _from_validated(cls, account_id: str) -> AccountId:
        instance = object.__new__(cls)
        instance._set_value(account_id)
        return instance

    @classmethod
    def _from_text(cls, text: str) -> AccountId:
        return cls(text)

    @classmethod
    def new_unvalidated(cls, account_id: str) -> AccountId:
        """Create an AccountId without validation.

        Restricted to legacy staged-validation callers and disabled by
        default. The caller is responsible for the invariant; call
        :meth:`validate` on the text before relying on the instance.

        Raises:
            RuntimeError: If ``NEAR_ACCOUNT_ID_INTERNAL_UNSTABLE`` is not set.
        """
        if not internal_unstable_enabled():
            raise RuntimeError(
                "AccountId.new_unvalidated is disabled; "
                f"set {INTERNAL_UNSTABLE_ENV_VAR}=1 to enable it"
            )
        warnings.warn(
            "AccountId construction without validation is deprecated",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls._from_validated(account_id)

    def as_view(self) -> AccountIdRef:
        """Borrow as an :class:`AccountIdRef` over the same text."""
        return AccountIdRef._new_unvalidated(self._value)

    def __reduce__(self) -> tuple[object, tuple[str]]:
        return (AccountId, (self._value,))
