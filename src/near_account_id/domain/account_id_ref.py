"""Borrowed account ID views.

:class:`AccountIdRef` is to :class:`~near_account_id.domain.account_id.AccountId`
what a borrowed ``str`` is to an owned one: it holds a reference to text
owned elsewhere, never copies it, and guarantees the text was validated.

:class:`AccountIdRefMut` is the mutable counterpart over a caller-owned
``bytearray``. Edits go through :meth:`AccountIdRefMut.assign`, which
validates before touching the buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from near_account_id.domain import validation
from near_account_id.domain._base import AccountIdBase
from near_account_id.domain.errors import ParseAccountError, ParseErrorKind

if TYPE_CHECKING:
    from near_account_id.domain.account_id import AccountId


class AccountIdRef(AccountIdBase):
    """Validated, zero-copy view over an account ID string.

    Examples:
        >>> alice = AccountIdRef.new("alice.near")
        >>> alice.get_parent_account_id()
        AccountIdRef('near')
    """

    __slots__ = ()

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("use AccountIdRef.new() to construct a view")

    @classmethod
    def _new_unvalidated(cls, account_id: str) -> AccountIdRef:
        """Wrap *account_id* without validation.

        Only for call sites where validity is structural, e.g. a suffix of a
        valid ID split at ``.``, or the text of an owned ID.
        """
        view = object.__new__(cls)
        view._set_value(account_id)
        return view

    @classmethod
    def new(cls, account_id: str | AccountIdBase) -> AccountIdRef:
        """Validate *account_id* and return a view over the same text.

        Raises:
            ParseAccountError: If the text is not a valid account ID.
        """
        if isinstance(account_id, AccountIdBase):
            return cls._new_unvalidated(account_id.as_str())
        validation.validate(account_id)
        return cls._new_unvalidated(account_id)

    @classmethod
    def new_or_panic(cls, account_id: str) -> AccountIdRef:
        """Build a view from a literal, aborting if it is malformed.

        Intended for module-level constants::

            SYSTEM = AccountIdRef.new_or_panic("system")

        Raises:
            InvalidAccountIdLiteral: If the literal is not a valid account ID.
        """
        validation.validate_literal(account_id)
        return cls._new_unvalidated(account_id)

    @classmethod
    def _from_text(cls, text: str) -> AccountIdRef:
        return cls.new(text)

    def to_owned(self) -> AccountId:
        """Promote to an owned :class:`AccountId` (no re-validation)."""
        from near_account_id.domain.account_id import AccountId

        return AccountId._from_validated(self._value)

    def __reduce__(self) -> tuple[object, tuple[str]]:
        return (AccountIdRef.new, (self._value,))


def _decode_buffer(buffer: bytearray | bytes) -> str:
    """Decode UTF-8, mapping failures to ``InvalidChar`` at the bad code point."""
    try:
        return bytes(buffer).decode("utf-8")
    except UnicodeDecodeError as exc:
        prefix = bytes(buffer[: exc.start]).decode("utf-8")
        raise ParseAccountError(ParseErrorKind.INVALID_CHAR, (len(prefix), "�")) from exc


class AccountIdRefMut:
    """Validated handle over a caller-owned ``bytearray``.

    The caller must hold the only reference used for writing while the
    handle is alive; edits made directly to the buffer bypass validation.
    """

    __slots__ = ("_buffer",)

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("use AccountIdRefMut.new_mut() to construct a mutable view")

    @classmethod
    def new_unchecked_mut(cls, buffer: bytearray) -> AccountIdRefMut:
        handle = object.__new__(cls)
        object.__setattr__(handle, "_buffer", buffer)
        return handle

    @classmethod
    def new_mut(cls, buffer: bytearray) -> AccountIdRefMut:
        """Validate the contents of *buffer* and wrap it without copying.

        Raises:
            TypeError: If *buffer* is not a ``bytearray``.
            ParseAccountError: If the contents are not a valid account ID.
        """
        if not isinstance(buffer, bytearray):
            raise TypeError(f"expected bytearray, got {type(buffer).__name__}")
        # Length errors take precedence over undecodable bytes.
        validation.check_length(len(buffer))
        validation.validate(_decode_buffer(buffer))
        return cls.new_unchecked_mut(buffer)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("AccountIdRefMut handles cannot be rebound; use assign()")

    def as_bytes(self) -> bytes:
        return bytes(self._buffer)

    def as_str(self) -> str:
        return self._buffer.decode("utf-8")

    def __len__(self) -> int:
        return len(self._buffer)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"AccountIdRefMut({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AccountIdRefMut):
            return self._buffer == other._buffer
        if isinstance(other, (AccountIdBase, str)):
            return self.as_str() == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def assign(self, account_id: str | AccountIdBase) -> None:
        """Replace the buffer contents in place with another valid ID.

        The buffer is untouched if *account_id* is invalid.

        Raises:
            ParseAccountError: If *account_id* is not a valid account ID.
        """
        if isinstance(account_id, AccountIdBase):
            text = account_id.as_str()
        else:
            validation.validate(account_id)
            text = account_id
        self._buffer[:] = text.encode("utf-8")

    def as_view(self) -> AccountIdRef:
        """Snapshot the current contents as an immutable view."""
        return AccountIdRef._new_unvalidated(self.as_str())

    def to_owned(self) -> AccountId:
        return self.as_view().to_owned()
