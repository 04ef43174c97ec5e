"""
API endpoints for the in-memory insurance contracts collection.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Body, Depends, Request, Response, status

from src.api.validation import require_fields
from src.database.contracts import (
    CONTRACT_STATUSES,
    STATUS_PENDING_APPROVAL,
    ContractStore,
    new_contract_id,
)
from src.error_handler import MissingFieldsError

logger = logging.getLogger(__name__)

api = APIRouter(tags=["Contracts"])

# Fields copied from a creation payload; anything else is ignored
CONTRACT_FIELDS = ("customerId", "policyType", "startDate", "endDate", "premiumAmount")


def get_store(request: Request) -> ContractStore:
    """Dependency returning the store owned by the running app"""
    return request.app.state.contract_store


def _as_object(payload: Any) -> Dict[str, Any]:
    # Arrays, scalars and a missing body all read as an empty object
    return payload if isinstance(payload, dict) else {}


def get_id_generator() -> Callable[[], str]:
    """Dependency for contract id generation"""
    return new_contract_id


@api.get("/contracts")
async def list_contracts(store: ContractStore = Depends(get_store)):
    contracts = store.list_all()
    logger.info("GET /contracts - Responding with %d contracts", len(contracts))
    return contracts


@api.post("/contracts", status_code=status.HTTP_201_CREATED)
async def create_contract(
    payload: Any = Body(default=None),
    store: ContractStore = Depends(get_store),
    generate_id: Callable[[], str] = Depends(get_id_generator),
):
    payload = _as_object(payload)
    try:
        require_fields(payload)
    except MissingFieldsError as e:
        logger.warning("POST /contracts - Rejected payload, missing %s", e.fields)
        raise

    contract = {"contractId": generate_id()}
    contract.update({k: payload[k] for k in CONTRACT_FIELDS if k in payload})
    contract["status"] = STATUS_PENDING_APPROVAL

    created = store.insert(contract)
    logger.info("POST /contracts - Created new contract: %s", created["contractId"])
    return created


@api.get("/contracts/{contract_id}")
async def get_contract(contract_id: str, store: ContractStore = Depends(get_store)):
    contract = store.find_by_id(contract_id)
    logger.info("GET /contracts/%s - Found contract", contract_id)
    return contract


@api.put("/contracts/{contract_id}")
async def update_contract(
    contract_id: str,
    payload: Any = Body(default=None),
    store: ContractStore = Depends(get_store),
):
    payload = _as_object(payload)
    new_status = payload.get("status")
    if "status" in payload and (not isinstance(new_status, str) or new_status not in CONTRACT_STATUSES):
        # Accepted as free text, clients may rely on custom values
        logger.warning("PUT /contracts/%s - Unknown status %r stored as-is", contract_id, new_status)

    updated = store.replace_by_id(contract_id, payload)
    logger.info("PUT /contracts/%s - Updated contract", contract_id)
    return updated


@api.delete("/contracts/{contract_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def cancel_contract(contract_id: str, store: ContractStore = Depends(get_store)):
    store.cancel_by_id(contract_id)
    logger.info("DELETE /contracts/%s - Cancelled contract", contract_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
