"""Services behind the web controllers."""

from ticketmint.web.services.ticket_service import (
    MissingFieldsError,
    TicketOperationError,
    TicketService,
)

__all__ = [
    "MissingFieldsError",
    "TicketOperationError",
    "TicketService",
]
