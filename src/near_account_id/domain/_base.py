"""Shared behavior for the owned and borrowed account ID types.

Both :class:`~near_account_id.domain.account_id.AccountId` and
:class:`~near_account_id.domain.account_id_ref.AccountIdRef` hold a single
``str`` in ``_value``. Every comparison funnels through :meth:`_other_text`
so the owned/view/plain-string combinations stay consistent in both
directions, and relationship operations are written once here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from near_account_id.domain import validation
from near_account_id.domain.types import AccountType

if TYPE_CHECKING:
    from near_account_id.domain.account_id_ref import AccountIdRef

SYSTEM_ACCOUNT = "system"

JSON_SCHEMA_DESCRIPTION = (
    "NEAR Account Identifier. A human-readable, syntactically valid account ID: "
    "2 to 64 characters of lowercase alphanumerics separated by single "
    "'-', '_' or '.' characters."
)


def account_id_json_schema() -> dict[str, Any]:
    """JSON schema for an account ID string."""
    return {
        "type": "string",
        "minLength": validation.MIN_LEN,
        "maxLength": validation.MAX_LEN,
        "pattern": validation.ACCOUNT_ID_PATTERN,
        "description": JSON_SCHEMA_DESCRIPTION,
    }


class AccountIdBase:
    """Text-backed account ID with comparison, hashing, and relationships.

    Ordering is lexicographic by code point, which for UTF-8 text is the
    same as byte order.
    """

    __slots__ = ("_value",)

    _value: str

    MIN_LEN = validation.MIN_LEN
    MAX_LEN = validation.MAX_LEN

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _set_value(self, value: str) -> None:
        object.__setattr__(self, "_value", value)

    # --- Accessors ---

    def as_str(self) -> str:
        return self._value

    def as_bytes(self) -> bytes:
        return self._value.encode("utf-8")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __len__(self) -> int:
        """Length in bytes."""
        return validation.byte_length(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    # --- Comparison ---

    @staticmethod
    def _other_text(other: object) -> str | None:
        if isinstance(other, AccountIdBase):
            return other._value
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value == text

    def __ne__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value != text

    def __lt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value < text

    def __le__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value <= text

    def __gt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value > text

    def __ge__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self._value >= text

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Relationships & classification ---

    def is_system(self) -> bool:
        """True for the reserved ``system`` account."""
        return self._value == SYSTEM_ACCOUNT

    def is_top_level(self) -> bool:
        """True if the ID has no ``.`` and is not the system account."""
        return not self.is_system() and "." not in self._value

    def is_sub_account_of(self, parent: AccountIdBase | str) -> bool:
        """True if this ID is a *direct* sub-account of *parent*.

        ``app.alice.near`` is a sub-account of ``alice.near`` but not of
        ``near``.
        """
        parent_text = parent._value if isinstance(parent, AccountIdBase) else parent
        suffix = "." + parent_text
        if not self._value.endswith(suffix):
            return False
        prefix = self._value[: -len(suffix)]
        return "." not in prefix

    def get_parent_account_id(self) -> AccountIdRef | None:
        """Everything after the first ``.``, or None for top-level shapes.

        The remainder of a valid ID split at a separator is itself valid,
        so the view is built without re-validating.
        """
        from near_account_id.domain.account_id_ref import AccountIdRef

        _, dot, parent = self._value.partition(".")
        if not dot:
            return None
        return AccountIdRef._new_unvalidated(parent)

    def get_account_type(self) -> AccountType:
        """Classify the ID by shape: eth-implicit, deterministic, near-implicit, or named."""
        value = self._value
        if validation.is_eth_implicit(value):
            return AccountType.ETH_IMPLICIT_ACCOUNT
        if validation.is_near_deterministic(value):
            return AccountType.NEAR_DETERMINISTIC_ACCOUNT
        if validation.is_near_implicit(value):
            return AccountType.NEAR_IMPLICIT_ACCOUNT
        return AccountType.NAMED_ACCOUNT

    # --- pydantic integration ---

    @classmethod
    def _from_text(cls, text: str) -> Self:
        """Validating constructor used by the pydantic hooks.

        Every concrete subclass overrides this with its own parsing
        constructor (``AccountId(text)``, ``AccountIdRef.new``); the base
        class has no storage of its own to build.

        Raises:
            ParseAccountError: If *text* is not a valid account ID.
        """
        raise NotImplementedError(f"{cls.__name__} must override _from_text")

    @classmethod
    def _coerce(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, AccountIdBase):
            return cls._from_text(value._value)
        if isinstance(value, str):
            return cls._from_text(value)
        raise ValueError(f"expected an account ID string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """JSON input must be a string; Python input may also be an ID instance."""
        from_json = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls._from_text),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_json,
            python_schema=core_schema.no_info_plain_validator_function(cls._coerce),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return account_id_json_schema()
