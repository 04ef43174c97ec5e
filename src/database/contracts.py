"""
In-memory contract store backing the mock contracts API.

Contracts are held as plain dictionaries in insertion order. Nothing is
persisted: every process starts from the two sample records returned by
`seed_contracts()`. Callers always receive copies, the store owns the
records it holds.
"""

from __future__ import annotations

import copy
import logging
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from src.error_handler import ContractNotFoundError

logger = logging.getLogger(__name__)

STATUS_PENDING_APPROVAL = "pending_approval"
STATUS_ACTIVE = "active"
STATUS_EXPIRED = "expired"
STATUS_CANCELLED = "cancelled"

CONTRACT_STATUSES = frozenset(
    {STATUS_PENDING_APPROVAL, STATUS_ACTIVE, STATUS_EXPIRED, STATUS_CANCELLED}
)

# Fields that may never change once a contract exists
IMMUTABLE_FIELDS = frozenset({"contractId"})


def new_contract_id() -> str:
    """Return a fresh identifier for a contract."""
    return str(uuid.uuid4())


def seed_contracts() -> List[Dict[str, Any]]:
    """Sample records loaded at startup so GET requests work immediately."""
    return [
        {
            "contractId": "d290f1ee-6c54-4b01-90e6-d701748f0851",
            "customerId": "cust_12345",
            "policyType": "Auto",
            "startDate": "2024-01-01",
            "endDate": "2025-01-01",
            "premiumAmount": 599.99,
            "status": STATUS_ACTIVE,
        },
        {
            "contractId": "a4b1c2d3-e4f5-6a7b-8c9d-0e1f2a3b4c5d",
            "customerId": "cust_67890",
            "policyType": "Home",
            "startDate": "2023-06-15",
            "endDate": "2024-06-15",
            "premiumAmount": 1200.50,
            "status": STATUS_EXPIRED,
        },
    ]


class ContractStore:
    """
    Ordered, process-local collection of contract records.

    Every read and mutation happens under a single lock so the store stays
    consistent if handlers are dispatched on worker threads.
    """

    def __init__(self, contracts: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        self._contracts: List[Dict[str, Any]] = [dict(c) for c in contracts or []]
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._contracts)

    @property
    def size(self) -> int:
        return len(self)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def list_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._contracts)

    def find_by_id(self, contract_id: str) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._contracts[self._index_of(contract_id)])

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Append a fully-formed record.

        The caller assigns `contractId` (see `new_contract_id`); no
        uniqueness check happens here.
        """
        stored = copy.deepcopy(record)
        with self._lock:
            self._contracts.append(stored)
        return copy.deepcopy(stored)

    def replace_by_id(self, contract_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge `patch` over the stored record and keep the result in
        the original position. Immutable fields and an empty `status` in the
        patch are dropped.
        """
        changes = {k: v for k, v in patch.items() if k not in IMMUTABLE_FIELDS}
        ignored = sorted(set(patch) & IMMUTABLE_FIELDS)
        if "status" in changes and not changes["status"]:
            changes.pop("status")
            ignored.append("status")
        if ignored:
            logger.warning("Ignoring fields %s in update of %s", ignored, contract_id)

        with self._lock:
            index = self._index_of(contract_id)
            merged = {**self._contracts[index], **copy.deepcopy(changes)}
            self._contracts[index] = merged
            return copy.deepcopy(merged)

    def cancel_by_id(self, contract_id: str) -> None:
        """Mark the contract cancelled. Cancelling twice is a no-op."""
        with self._lock:
            self._contracts[self._index_of(contract_id)]["status"] = STATUS_CANCELLED

    def _index_of(self, contract_id: str) -> int:
        for index, contract in enumerate(self._contracts):
            if contract.get("contractId") == contract_id:
                return index
        raise ContractNotFoundError(contract_id)
