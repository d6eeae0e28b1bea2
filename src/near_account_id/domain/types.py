"""Account classification enum.

Classification is computed from the shape of the text and never stored.
"""

from __future__ import annotations

from enum import StrEnum


class AccountType(StrEnum):
    """Structural category of a valid account ID."""

    NAMED_ACCOUNT = "named"
    NEAR_IMPLICIT_ACCOUNT = "near_implicit"
    ETH_IMPLICIT_ACCOUNT = "eth_implicit"
    NEAR_DETERMINISTIC_ACCOUNT = "near_deterministic"

    def is_implicit(self) -> bool:
        """True for every category derived from a key or hash."""
        return self is not AccountType.NAMED_ACCOUNT
