"""
HTTP routes.

Every route validates its input, makes at most one gateway round trip via
the service, and formats the result. Client input errors become 400;
any other failure becomes 500 carrying the underlying message.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from stellar_service.api.schemas import (
    ErrorResponse,
    KeypairResponse,
    PaymentBody,
    SignedTransactionResponse,
    SubmissionResponse,
    SubmitBody,
    TrustlineBody,
)
from stellar_service.core.errors import InvalidRequestError, error_message
from stellar_service.core.service import LedgerService

logger = structlog.get_logger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def get_service(request: Request) -> LedgerService:
    """Dependency: the service bound to the running app."""
    return request.app.state.service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def _failure(event: str, exc: Exception) -> JSONResponse:
    if isinstance(exc, InvalidRequestError):
        logger.warning(event, error=exc.message)
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    message = error_message(exc)
    logger.error(event, error=message, error_type=exc.__class__.__name__)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.get("/")
async def home() -> dict:
    return {"success": True}


@router.get("/api")
async def api_root() -> dict:
    return {"message": "Stellar transaction service is running"}


@router.get(
    "/api/create-keypair",
    response_model=KeypairResponse,
    responses=_ERROR_RESPONSES,
)
async def create_keypair(service: LedgerService = Depends(get_service)):
    try:
        keypair = service.create_keypair()
    except Exception as e:
        return _failure("create_keypair_failed", e)
    return KeypairResponse.from_keypair(keypair)


@router.post(
    "/api/create-payment",
    response_model=SignedTransactionResponse,
    responses=_ERROR_RESPONSES,
)
async def create_payment(
    payload: Optional[PaymentBody] = None,
    service: LedgerService = Depends(get_service),
):
    try:
        signed_xdr = await service.create_payment((payload or PaymentBody()).to_request())
    except Exception as e:
        return _failure("create_payment_failed", e)
    return SignedTransactionResponse(signed_xdr=signed_xdr)


@router.post(
    "/api/create-trustline",
    response_model=SignedTransactionResponse,
    responses=_ERROR_RESPONSES,
)
async def create_trustline(
    payload: Optional[TrustlineBody] = None,
    service: LedgerService = Depends(get_service),
):
    try:
        signed_xdr = await service.create_trustline((payload or TrustlineBody()).to_request())
    except Exception as e:
        return _failure("create_trustline_failed", e)
    return SignedTransactionResponse(signed_xdr=signed_xdr)


@router.post(
    "/api/submit-transaction",
    response_model=SubmissionResponse,
    responses=_ERROR_RESPONSES,
)
async def submit_transaction(
    payload: Optional[SubmitBody] = None,
    service: LedgerService = Depends(get_service),
):
    try:
        result = await service.submit_transaction((payload or SubmitBody()).signed_xdr)
    except Exception as e:
        return _failure("submit_transaction_failed", e)
    return SubmissionResponse.from_result(result)
