"""Domain errors for the contracts API and the handlers that render them."""
from typing import List, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ContractError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = 500
    message: str = "Internal server error"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class MissingFieldsError(ContractError):
    status_code = 400
    message = "Missing required fields"

    def __init__(self, fields: Optional[List[str]] = None) -> None:
        super().__init__(self.message)
        self.fields = list(fields or [])


class ContractNotFoundError(ContractError):
    status_code = 404
    message = "Contract not found"

    def __init__(self, contract_id: str) -> None:
        super().__init__(self.message)
        self.contract_id = contract_id


class ErrorHandler:
    def handle_exception(self, request: Request, exc: ContractError) -> JSONResponse:
        logger.info("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_error_handlers(app: FastAPI, handler: Optional[ErrorHandler] = None) -> None:
    handler = handler or ErrorHandler()

    @app.exception_handler(ContractError)
    async def _contract_error(request: Request, exc: ContractError) -> JSONResponse:
        return handler.handle_exception(request, exc)
