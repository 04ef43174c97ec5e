"""Presence checks for contract creation payloads.

Only presence is checked: a required field must be supplied with a truthy
value. Types and ranges are not validated. On failure `MissingFieldsError`
is raised so the API answers HTTP 400.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from src.error_handler import MissingFieldsError

REQUIRED_CONTRACT_FIELDS = ("customerId", "policyType", "startDate", "premiumAmount")


def _is_present(value: Any) -> bool:
    # Empty containers count as supplied values, like JSON clients expect
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def missing_fields(payload: Dict[str, Any], fields: Iterable[str] = REQUIRED_CONTRACT_FIELDS) -> List[str]:
    return [field for field in fields if not _is_present(payload.get(field))]


def require_fields(payload: Dict[str, Any], fields: Iterable[str] = REQUIRED_CONTRACT_FIELDS) -> None:
    missing = missing_fields(payload, fields)
    if missing:
        raise MissingFieldsError(missing)
