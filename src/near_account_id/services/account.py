"""AccountService: validation, classification, and codec operations.

Each method takes raw text from an outer surface (CLI arguments, hex
payloads), runs it through the domain layer, and reports the outcome as a
:class:`ServiceResult`. Domain exceptions stop here.
"""

from __future__ import annotations

import logging
from typing import Any

from near_account_id.codec import borsh
from near_account_id.domain._base import account_id_json_schema
from near_account_id.domain.account_id import AccountId
from near_account_id.domain.account_id_ref import AccountIdRef
from near_account_id.domain.errors import ParseAccountError
from near_account_id.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _parse_failure(op: str, account_id: str, exc: ParseAccountError) -> ServiceResult:
    logger.debug("Rejected account ID %r: %s", account_id, exc)
    return ServiceResult.failure(op, ServiceError.from_parse_error(account_id, exc))


def _describe(account_id: AccountIdRef) -> dict[str, Any]:
    account_type = account_id.get_account_type()
    parent = account_id.get_parent_account_id()
    return {
        "account_id": account_id.as_str(),
        "account_type": str(account_type),
        "is_implicit": account_type.is_implicit(),
        "is_top_level": account_id.is_top_level(),
        "is_system": account_id.is_system(),
        "parent": parent.as_str() if parent is not None else None,
        "length": len(account_id),
    }


class AccountService:
    """Stateless facade over the account ID domain for outer surfaces."""

    def validate(self, account_id: str) -> ServiceResult:
        """Validate a single account ID."""
        try:
            view = AccountIdRef.new(account_id)
        except ParseAccountError as exc:
            return _parse_failure("validate", account_id, exc)
        return ServiceResult.success(
            "validate",
            {"account_id": view.as_str(), "account_type": str(view.get_account_type())},
        )

    def validate_many(self, account_ids: list[str]) -> ServiceResult:
        """Validate several IDs; fails if any one is invalid.

        Every ID is checked, so ``data`` lists all valid and all invalid
        inputs even on failure.
        """
        valid: list[str] = []
        invalid: list[dict[str, Any]] = []
        for account_id in account_ids:
            try:
                AccountIdRef.new(account_id)
            except ParseAccountError as exc:
                error = ServiceError.from_parse_error(account_id, exc)
                invalid.append({"message": error.message, **error.detail})
            else:
                valid.append(account_id)

        data = {"valid": valid, "invalid": invalid}
        if not invalid:
            return ServiceResult.success("validate", data)
        logger.debug("%d of %d account IDs rejected", len(invalid), len(account_ids))
        error = ServiceError(
            code="invalid_account_ids",
            message=f"{len(invalid)} of {len(account_ids)} account IDs are invalid",
            detail={"invalid": invalid},
        )
        return ServiceResult.failure("validate", error, data)

    def inspect(self, account_id: str) -> ServiceResult:
        """Classify an account ID and report its relationships."""
        try:
            view = AccountIdRef.new(account_id)
        except ParseAccountError as exc:
            return _parse_failure("inspect", account_id, exc)
        warnings = [f"{view} is a reserved system account"] if view.is_system() else []
        return ServiceResult.success("inspect", _describe(view), warnings)

    def sub_account(self, child: str, parent: str) -> ServiceResult:
        """Check whether *child* is a direct sub-account of *parent*."""
        views: list[AccountIdRef] = []
        for account_id in (child, parent):
            try:
                views.append(AccountIdRef.new(account_id))
            except ParseAccountError as exc:
                return _parse_failure("sub_account", account_id, exc)
        child_id, parent_id = views
        return ServiceResult.success(
            "sub_account",
            {
                "child": child_id.as_str(),
                "parent": parent_id.as_str(),
                "is_sub_account": child_id.is_sub_account_of(parent_id),
            },
        )

    def schema(self) -> ServiceResult:
        """Return the JSON schema for an account ID string."""
        return ServiceResult.success("schema", {"schema": account_id_json_schema()})

    def encode(self, account_id: str) -> ServiceResult:
        """Borsh-encode an account ID, returned as hex."""
        try:
            owned = AccountId(account_id)
        except ParseAccountError as exc:
            return _parse_failure("encode", account_id, exc)
        return ServiceResult.success(
            "encode",
            {"account_id": owned.as_str(), "hex": borsh.serialize(owned).hex()},
        )

    def decode(self, payload_hex: str) -> ServiceResult:
        """Decode a hex borsh payload back into an account ID."""
        try:
            payload = bytes.fromhex(payload_hex)
        except ValueError as exc:
            return ServiceResult.failure(
                "decode",
                ServiceError(code="invalid_hex", message=f"payload is not hex: {exc}"),
            )
        try:
            account_id = borsh.deserialize(payload)
        except ParseAccountError as exc:
            return _parse_failure("decode", payload_hex, exc)
        except borsh.BorshDecodeError as exc:
            logger.debug("Malformed borsh payload %s: %s", payload_hex, exc)
            return ServiceResult.failure(
                "decode",
                ServiceError(code="malformed_payload", message=str(exc)),
            )
        return ServiceResult.success("decode", _describe(account_id.as_view()))
