"""HTTP controllers for the ticket relay.

SECURITY: These controllers MUST NOT sign or submit user transfers.
"""

from ticketmint.web.controllers.tickets import router as tickets_router

__all__ = [
    "tickets_router",
]
