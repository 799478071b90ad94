"""Component tests for ticketmint modules.

Tests the ticket service, settings and the command-line client.
"""

import importlib
import json
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ticketmint.api import app as app_module
from ticketmint.cli import build_parser, run_command
from ticketmint.client.api import TicketApiClient
from ticketmint.config import Settings
from ticketmint.ledger.base import LedgerError
from ticketmint.ledger.dryrun import DryRunLedger
from ticketmint.web.services.ticket_service import (
    MissingFieldsError,
    TicketOperationError,
    TicketService,
)


@pytest.fixture
def service(settings):
    return TicketService(DryRunLedger(token_base=1), settings)


class TestTicketService:
    """Tests for the ticket service rules."""

    def test_metadata_is_event_and_seat_json(self):
        metadata = TicketService.build_metadata("Gala", "Row 4 Seat 2")

        assert json.loads(metadata.decode("utf-8")) == {"event": "Gala", "seat": "Row 4 Seat 2"}

    @pytest.mark.asyncio
    async def test_mint_uses_configured_collection_name(self, settings):
        ledger = DryRunLedger()
        ledger.create_nft_collection = AsyncMock(return_value="0.0.50")
        ledger.mint_nft = AsyncMock(return_value="1")
        settings = settings.model_copy(update={"token_name": "GalaPass", "token_symbol": "GALA"})

        receipt = await TicketService(ledger, settings).mint_ticket("Gala", "A1")

        ledger.create_nft_collection.assert_awaited_once_with("GalaPass", "GALA")
        ledger.mint_nft.assert_awaited_once_with("0.0.50", TicketService.build_metadata("Gala", "A1"))
        assert receipt.token_id == "0.0.50"

    @pytest.mark.asyncio
    async def test_mint_requires_both_fields(self, service):
        with pytest.raises(MissingFieldsError):
            await service.mint_ticket("Gala", None)

    @pytest.mark.asyncio
    async def test_mint_wraps_ledger_errors(self, service):
        service.ledger.create_nft_collection = AsyncMock(side_effect=LedgerError("TIMEOUT"))

        with pytest.raises(TicketOperationError, match="^Failed to mint ticket: TIMEOUT$"):
            await service.mint_ticket("Gala", "A1")

    @pytest.mark.asyncio
    async def test_prepare_transfer_parses_serial(self, service):
        service.ledger.build_nft_transfer = AsyncMock(return_value=b"\x01\x02")

        raw = await service.prepare_transfer("0.0.1", " 5 ", "0.0.3")

        assert raw == b"\x01\x02"
        service.ledger.build_nft_transfer.assert_awaited_once_with(
            token_id="0.0.1", serial_number=5, receiver_account_id="0.0.3"
        )

    @pytest.mark.asyncio
    async def test_prepare_transfer_bad_serial(self, service):
        with pytest.raises(TicketOperationError, match="^Failed to prepare transfer: Invalid serial number"):
            await service.prepare_transfer("0.0.1", "one", "0.0.3")

    @pytest.mark.asyncio
    async def test_verify_is_a_stub(self, service):
        message = await service.verify_ticket("0.0.1", "1", "0.0.999")

        assert message == "Ownership verified for Token ID: 0.0.1, Serial: 1 (mock)"

    @pytest.mark.asyncio
    async def test_verify_requires_account(self, service):
        with pytest.raises(MissingFieldsError, match="user account ID"):
            await service.verify_ticket("0.0.1", "1", "")


class TestSettings:
    """Tests for settings helpers."""

    def test_defaults(self):
        settings = Settings(_env_file=None, operator_id=None, operator_key=None, ledger_backend="dryrun")

        assert settings.api_port == 3001
        assert settings.token_name == "EventTicket"
        assert settings.token_symbol == "ETICKET"
        assert settings.is_dry_run
        assert not settings.has_operator

    def test_allowed_origins(self):
        settings = Settings(_env_file=None, cors_origins="http://localhost:3000, https://tickets.example ,")

        assert settings.allowed_origins == ["http://localhost:3000", "https://tickets.example"]

    def test_safe_dict_hides_key(self):
        settings = Settings(_env_file=None, operator_id="0.0.1", operator_key="secret-key")

        safe = settings.get_safe_dict()

        assert safe["ledger"]["operator_key"] == "***"
        assert "secret-key" not in json.dumps(safe)


class TestAppFactory:
    """Tests for ledger ownership in create_app."""

    @pytest.fixture
    def created_ledgers(self, monkeypatch):
        created = []
        original_init = DryRunLedger.__init__

        def counting_init(ledger, *args, **kwargs):
            created.append(ledger)
            original_init(ledger, *args, **kwargs)

        monkeypatch.setattr(DryRunLedger, "__init__", counting_init)
        return created

    def test_import_builds_no_ledger(self, created_ledgers):
        module = importlib.reload(app_module)

        assert created_ledgers == []
        assert not hasattr(module, "app")

    def test_one_ledger_per_app(self, created_ledgers):
        app = app_module.create_app(Settings(_env_file=None, ledger_backend="dryrun"))

        assert len(created_ledgers) == 1
        assert app.state.ledger is created_ledgers[0]

    def test_injected_ledger_is_used(self, created_ledgers):
        ledger = DryRunLedger(token_base=3)

        app = app_module.create_app(Settings(_env_file=None), ledger=ledger)

        assert created_ledgers == [ledger]
        assert app.state.ledger is ledger


@pytest_asyncio.fixture
async def cli_api(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield TicketApiClient(http_client=http)


class TestCli:
    """Tests for the command-line client."""

    @pytest.mark.asyncio
    async def test_mint_prints_ticket(self, cli_api, capsys):
        args = build_parser().parse_args(["mint", "--event", "Gala", "--seat", "A1"])

        code = await run_command(args, cli_api)

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["ticket"] == {"tokenId": "0.0.7000", "serialNumber": "1"}

    @pytest.mark.asyncio
    async def test_prepare_transfer_prints_hex(self, cli_api, capsys):
        args = build_parser().parse_args(
            ["prepare-transfer", "--token-id", "0.0.7000", "--serial", "1", "--buyer", "0.0.4"]
        )

        code = await run_command(args, cli_api)

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert bytes.fromhex(out["transactionBytes"]).startswith(b"DRYRUN:")

    @pytest.mark.asyncio
    async def test_error_exit_code(self, cli_api, capsys):
        args = build_parser().parse_args(
            ["prepare-transfer", "--token-id", "bad", "--serial", "1", "--buyer", "0.0.4"]
        )

        code = await run_command(args, cli_api)

        assert code == 1
        out = json.loads(capsys.readouterr().out)
        assert out["success"] is False
        assert out["error"].startswith("Failed to prepare transfer")

    @pytest.mark.asyncio
    async def test_demo_mints_and_verifies(self, cli_api, capsys):
        args = build_parser().parse_args(["demo", "--event", "Gala", "--seat", "A1"])

        code = await run_command(args, cli_api)

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["verification"].endswith("(mock)")
