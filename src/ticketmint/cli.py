"""Command-line client for the ticket relay.

Usage:
    ticketmint serve
    ticketmint mint --event "Concert 2025-06-01" --seat A12
    ticketmint prepare-transfer --token-id 0.0.5000000 --serial 1 --buyer 0.0.4321
    ticketmint verify --token-id 0.0.5000000 --serial 1 --account 0.0.4321
    ticketmint demo --event "Concert" --seat A12

Environment variables:
    TICKETMINT_URL: URL of the relay (default: http://localhost:3001)

The CLI has no wallet, so transfers are only prepared, never signed.
"""

import argparse
import asyncio
import json
import logging
import os
import sys

from dotenv import load_dotenv

from ticketmint.client.api import DEFAULT_BASE_URL, TicketApiClient, TicketApiError
from ticketmint.client.controller import TicketController


def _print(data: dict) -> None:
    print(json.dumps(data, indent=2))


async def _mint(api: TicketApiClient, args) -> dict:
    ticket = await api.mint_ticket(args.event, args.seat)
    return {"success": True, "ticket": ticket.model_dump(by_alias=True)}


async def _prepare_transfer(api: TicketApiClient, args) -> dict:
    prepared = await api.prepare_transfer(args.token_id, args.serial, args.buyer)
    data = prepared.model_dump(by_alias=True)
    # Hex is easier to read on a terminal than a byte list
    data["transactionBytes"] = bytes(prepared.transaction_bytes).hex()
    return data


async def _verify(api: TicketApiClient, args) -> dict:
    message = await api.verify_ticket(args.token_id, args.serial, args.account)
    return {"success": True, "message": message}


async def _demo(api: TicketApiClient, args) -> dict:
    controller = TicketController(api)
    controller.event_details = args.event
    controller.seat_number = args.seat
    ok = await controller.run()
    result = {"success": ok}
    if controller.ticket:
        result["ticket"] = controller.ticket.model_dump(by_alias=True)
    if controller.verification_result:
        result["verification"] = controller.verification_result
    if controller.error:
        result["error"] = controller.error
    return result


COMMANDS = {
    "mint": _mint,
    "prepare-transfer": _prepare_transfer,
    "verify": _verify,
    "demo": _demo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ticketmint", description="NFT event ticket relay")
    parser.add_argument(
        "--url",
        default=os.environ.get("TICKETMINT_URL", DEFAULT_BASE_URL),
        help=f"Relay URL (default: {DEFAULT_BASE_URL})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Run the relay server")

    mint = sub.add_parser("mint", help="Mint a ticket")
    mint.add_argument("--event", required=True, help="Event details")
    mint.add_argument("--seat", required=True, help="Seat number")

    transfer = sub.add_parser("prepare-transfer", help="Prepare an unsigned transfer")
    transfer.add_argument("--token-id", required=True)
    transfer.add_argument("--serial", required=True)
    transfer.add_argument("--buyer", required=True, help="Buyer account ID")

    verify = sub.add_parser("verify", help="Verify ticket ownership (mock)")
    verify.add_argument("--token-id", required=True)
    verify.add_argument("--serial", required=True)
    verify.add_argument("--account", required=True, help="User account ID")

    demo = sub.add_parser("demo", help="Mint then verify in one go")
    demo.add_argument("--event", required=True, help="Event details")
    demo.add_argument("--seat", required=True, help="Seat number")

    return parser


async def run_command(args, api: TicketApiClient) -> int:
    """Run one client command and print its JSON result."""
    try:
        result = await COMMANDS[args.command](api, args)
    except TicketApiError as e:
        _print({"success": False, "error": str(e)})
        return 1

    _print(result)
    return 0 if result.get("success") else 1


async def _run_client(args) -> int:
    async with TicketApiClient(args.url) as api:
        return await run_command(args, api)


def main(argv=None) -> int:
    """CLI entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from ticketmint.main import main as serve
        serve()
        return 0

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return asyncio.run(_run_client(args))


if __name__ == "__main__":
    sys.exit(main())
