"""Web boundary layer for the ticket relay.

SECURITY PRINCIPLES:
1. The server holds only the operator credentials.
2. Transfers are prepared unsigned; the buyer's wallet signs them.
3. Nothing here stores ticket state between requests.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
