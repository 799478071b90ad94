"""Request and response contracts for the ticket relay API.

These Pydantic models define the JSON interface used by web clients.
"""

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

__all__ = [
    "ErrorResponse",
    "MintTicketRequest",
    "MintTicketResponse",
    "PrepareTransferRequest",
    "PrepareTransferResponse",
    "Ticket",
    "VerifyTicketRequest",
    "VerifyTicketResponse",
]
