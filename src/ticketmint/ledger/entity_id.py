"""Ledger entity identifiers.

Accounts and tokens share the ``shard.realm.num`` syntax, optionally
followed by a five-letter checksum (``0.0.1234-vfmkw``).
"""

import re
from dataclasses import dataclass
from typing import Optional

from ticketmint.ledger.base import EntityIdError

_ENTITY_ID_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-([a-z]{5}))?$")

# Serials are int64 on the ledger
MAX_SERIAL_NUMBER = 2**63 - 1


@dataclass(frozen=True)
class EntityId:
    """Parsed shard.realm.num identifier."""

    shard: int
    realm: int
    num: int
    checksum: Optional[str] = None

    @classmethod
    def parse(cls, value: str, kind: str = "entity") -> "EntityId":
        """Parse an identifier string.

        Args:
            value: Identifier such as "0.0.1234"
            kind: Label used in the error message (account, token)

        Raises:
            EntityIdError: If the string is not shard.realm.num
        """
        match = _ENTITY_ID_RE.match(value.strip()) if isinstance(value, str) else None
        if not match:
            raise EntityIdError(f"Invalid {kind} ID: {value!r}")
        shard, realm, num, checksum = match.groups()
        return cls(int(shard), int(realm), int(num), checksum)

    def __str__(self) -> str:
        return f"{self.shard}.{self.realm}.{self.num}"


def parse_serial_number(value) -> int:
    """Parse an NFT serial number.

    Raises:
        EntityIdError: If the value is not a positive int64
    """
    try:
        serial = int(str(value).strip())
    except ValueError:
        raise EntityIdError(f"Invalid serial number: {value!r}")
    if serial <= 0:
        raise EntityIdError(f"Serial number must be positive: {value!r}")
    if serial > MAX_SERIAL_NUMBER:
        raise EntityIdError(f"Serial number out of range: {value!r}")
    return serial
