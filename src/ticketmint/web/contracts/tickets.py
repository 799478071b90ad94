"""Ticket contracts for the relay API.

Wire names are camelCase to match the browser client; Python attributes
are snake_case. Request fields are optional here so that a missing field
is reported as a 400 with the API's own error body.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CamelModel(BaseModel):
    """Base model that accepts and emits camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)


class Ticket(CamelModel):
    """NFT ticket identifiers returned by the ledger."""

    token_id: str = Field(..., alias="tokenId", description="Collection token ID (0.0.N)")
    serial_number: str = Field(..., alias="serialNumber", description="Serial within the collection")


class MintTicketRequest(CamelModel):
    """Request to mint a ticket for an event seat."""

    event_details: Optional[str] = Field(None, alias="eventDetails", description="Event description")
    seat_number: Optional[str] = Field(None, alias="seatNumber", description="Seat label")


class MintTicketResponse(CamelModel):
    success: bool = True
    ticket: Ticket


class PrepareTransferRequest(CamelModel):
    """Request to build an unsigned ticket transfer."""

    token_id: Optional[str] = Field(None, alias="tokenId")
    serial_number: Optional[str] = Field(None, alias="serialNumber")
    buyer_account_id: Optional[str] = Field(None, alias="buyerAccountId")

    @field_validator("serial_number", mode="before")
    @classmethod
    def coerce_serial(cls, v):
        """Accept numeric serials and keep them as strings."""
        if v is False or (isinstance(v, int) and v == 0):
            # Falsy JSON values count as a missing serial
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class PrepareTransferResponse(CamelModel):
    """Unsigned transfer for the buyer's wallet to sign.

    The server never signs or submits this transaction.
    """

    success: bool = True
    transaction_bytes: list[int] = Field(
        ..., alias="transactionBytes", description="Serialized unsigned transaction"
    )
    token_id: str = Field(..., alias="tokenId")
    serial_number: str = Field(..., alias="serialNumber")
    buyer_account_id: str = Field(..., alias="buyerAccountId")


class VerifyTicketRequest(CamelModel):
    """Request to verify ticket ownership."""

    token_id: Optional[str] = Field(None, alias="tokenId")
    serial_number: Optional[str] = Field(None, alias="serialNumber")
    user_account_id: Optional[str] = Field(None, alias="userAccountId")

    @field_validator("serial_number", mode="before")
    @classmethod
    def coerce_serial(cls, v):
        """Accept numeric serials and keep them as strings."""
        if v is False or (isinstance(v, int) and v == 0):
            # Falsy JSON values count as a missing serial
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class VerifyTicketResponse(CamelModel):
    success: bool = True
    message: str


class ErrorResponse(CamelModel):
    """Error body shared by every endpoint."""

    success: bool = False
    error: str

