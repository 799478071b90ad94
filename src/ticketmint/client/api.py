"""HTTP client for the ticket relay API."""

import logging
from typing import Optional

import httpx

from ticketmint.web.contracts.tickets import PrepareTransferResponse, Ticket

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001"


class TicketApiError(Exception):
    """Raised when the relay returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TicketApiClient:
    """Async client for /mint-ticket, /prepare-transfer and /verify-ticket."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Relay server URL
            timeout: Request timeout in seconds
            http_client: Pre-configured client (its base_url is used as is)
        """
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def _post(self, path: str, payload: dict) -> dict:
        try:
            response = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise TicketApiError(str(e) or e.__class__.__name__) from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_error or not data.get("success"):
            message = data.get("error") or f"Request failed with status code {response.status_code}"
            raise TicketApiError(message, status_code=response.status_code)
        return data

    async def mint_ticket(self, event_details: str, seat_number: str) -> Ticket:
        data = await self._post(
            "/mint-ticket",
            {"eventDetails": event_details, "seatNumber": seat_number},
        )
        ticket = Ticket.model_validate(data["ticket"])
        logger.info(f"Ticket received: {ticket.token_id}#{ticket.serial_number}")
        return ticket

    async def prepare_transfer(
        self,
        token_id: str,
        serial_number: str,
        buyer_account_id: str,
    ) -> PrepareTransferResponse:
        data = await self._post(
            "/prepare-transfer",
            {
                "tokenId": token_id,
                "serialNumber": serial_number,
                "buyerAccountId": buyer_account_id,
            },
        )
        return PrepareTransferResponse.model_validate(data)

    async def verify_ticket(self, token_id: str, serial_number: str, user_account_id: str) -> str:
        data = await self._post(
            "/verify-ticket",
            {
                "tokenId": token_id,
                "serialNumber": serial_number,
                "userAccountId": user_account_id,
            },
        )
        return data["message"]

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "TicketApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
