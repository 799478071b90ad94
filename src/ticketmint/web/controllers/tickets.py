"""Ticket API endpoints.

Mint and transfer preparation delegate to the ledger backend. The
transfer endpoint returns unsigned bytes; NO signing or submission
happens server-side.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ticketmint.web.contracts.tickets import (
    ErrorResponse,
    MintTicketRequest,
    MintTicketResponse,
    PrepareTransferRequest,
    PrepareTransferResponse,
    Ticket,
    VerifyTicketRequest,
    VerifyTicketResponse,
)
from ticketmint.web.services.ticket_service import (
    MissingFieldsError,
    TicketOperationError,
    TicketService,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tickets"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing required field"},
    500: {"model": ErrorResponse, "description": "Ledger call failed"},
}


def get_ticket_service(request: Request) -> TicketService:
    """Build the ticket service around the app's shared ledger backend."""
    return TicketService(request.app.state.ledger, request.app.state.settings)


@router.post("/mint-ticket", response_model=MintTicketResponse, responses=ERROR_RESPONSES)
async def mint_ticket(
    request: MintTicketRequest,
    service: TicketService = Depends(get_ticket_service),
) -> MintTicketResponse:
    """Mint a ticket NFT in a new collection."""
    try:
        receipt = await service.mint_ticket(request.event_details, request.seat_number)
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except TicketOperationError as e:
        logger.error(f"Minting error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return MintTicketResponse(
        ticket=Ticket(token_id=receipt.token_id, serial_number=receipt.serial_number),
    )


@router.post("/prepare-transfer", response_model=PrepareTransferResponse, responses=ERROR_RESPONSES)
async def prepare_transfer(
    request: PrepareTransferRequest,
    service: TicketService = Depends(get_ticket_service),
) -> PrepareTransferResponse:
    """Build an unsigned ticket transfer for the buyer to sign.

    The client must:
    1. Sign the returned bytes with the wallet
    2. Submit the signed transaction to the network
    """
    try:
        transaction_bytes = await service.prepare_transfer(
            request.token_id,
            request.serial_number,
            request.buyer_account_id,
        )
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except TicketOperationError as e:
        logger.error(f"Transfer preparation error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return PrepareTransferResponse(
        transaction_bytes=list(transaction_bytes),
        token_id=request.token_id,
        serial_number=request.serial_number,
        buyer_account_id=request.buyer_account_id,
    )


@router.post("/verify-ticket", response_model=VerifyTicketResponse, responses=ERROR_RESPONSES)
async def verify_ticket(
    request: VerifyTicketRequest,
    service: TicketService = Depends(get_ticket_service),
) -> VerifyTicketResponse:
    """Verify ticket ownership (mock: always succeeds)."""
    try:
        message = await service.verify_ticket(
            request.token_id,
            request.serial_number,
            request.user_account_id,
        )
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return VerifyTicketResponse(message=message)
