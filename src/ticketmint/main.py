"""Main entry point - runs the ticket relay API."""

import asyncio
import logging
import signal

import uvicorn

from ticketmint.api.app import create_app
from ticketmint.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure root logging for the process."""
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class Application:
    """Runs the FastAPI relay under uvicorn until a shutdown signal."""

    def __init__(self):
        self.settings = get_settings()
        self.server = None

    async def start(self):
        """Start the API server."""
        configure_logging(self.settings.debug)

        logger.info("Starting ticketmint...")
        logger.info(f"Environment: {self.settings.environment}")
        if self.settings.is_dry_run:
            logger.warning("LEDGER_BACKEND=dryrun - tickets are simulated, nothing reaches the ledger")

        app = create_app(self.settings)
        config = uvicorn.Config(
            app,
            host=self.settings.api_host,
            port=self.settings.api_port,
            log_level="debug" if self.settings.debug else "info",
        )
        self.server = uvicorn.Server(config)
        logger.info(f"Server running on {self.settings.api_host}:{self.settings.api_port}")
        try:
            await self.server.serve()
        except asyncio.CancelledError:
            logger.info("API server cancelled")

    def shutdown(self):
        """Signal shutdown."""
        logger.info("Shutdown requested")
        if self.server is not None:
            self.server.should_exit = True


def main():
    """Main entry point."""
    app = Application()

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, app.shutdown)

    try:
        loop.run_until_complete(app.start())
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        loop.close()


if __name__ == "__main__":
    main()
