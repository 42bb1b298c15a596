"""Main entry point for the CheatHub application.

This module provides the application entry point with:
- Command-line argument parsing
- Application initialization and dependency injection
- Graceful shutdown handling
"""

import argparse
import asyncio
import signal
import sys
from pathlib import Path

import structlog
from textual.app import App

from cheathub import __version__
from cheathub.models import AppConfig
from cheathub.services.config import ConfigurationService
from cheathub.services.http_client import HttpClientService
from cheathub.services.logging import setup_logging


log = structlog.stdlib.get_logger()


class ApplicationContext:
    """Container for application services.

    Services are created lazily and released in ``cleanup``.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path: Path | None = config_path
        self._config_service: ConfigurationService | None = None
        self._http_client: HttpClientService | None = None
        self._config: AppConfig | None = None
        self._app: App[None] | None = None
        self._shutdown_requested: bool = False

    @property
    def config_service(self) -> ConfigurationService:
        """Get the configuration service (lazy initialization)."""
        if self._config_service is None:
            self._config_service = ConfigurationService(config_path=self._config_path)
        return self._config_service

    @property
    def config(self) -> AppConfig:
        """Get the current application configuration."""
        if self._config is None:
            self._config = self.config_service.load_config()
        return self._config

    @property
    def http_client(self) -> HttpClientService:
        """Get the HTTP client service (lazy initialization)."""
        if self._http_client is None:
            self._http_client = HttpClientService(
                base_url=self.config.api_base_url,
                timeout=self.config.request_timeout,
                verify_ssl=self.config.verify_ssl,
            )
        return self._http_client

    def attach_app(self, app: App[None]) -> None:
        """Remember the running application so shutdown can reach it."""
        self._app = app

    def request_shutdown(self) -> None:
        """Request graceful shutdown of the application."""
        self._shutdown_requested = True
        log.info("Shutdown requested")
        if self._app is not None:
            self._app.exit()

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    async def cleanup(self) -> None:
        """Close open connections."""
        log.info("Cleaning up application resources")
        if self._http_client is not None:
            await self._http_client.close()
        log.info("Application cleanup complete")


class ParsedArgs:
    """Type-safe container for parsed command-line arguments."""

    def __init__(
        self,
        config: Path | None,
        log_level: str | None,
        log_dir: Path | None,
    ) -> None:
        self.config: Path | None = config
        self.log_level: str | None = log_level
        self.log_dir: Path | None = log_dir


def parse_arguments(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cheathub",
        description="Terminal client for browsing and copying cheats from the CheatSlips catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cheathub                            Start the application
  cheathub --log-level DEBUG          Start with debug logging
  cheathub --config ./cheathub.json   Use a custom config file
        """
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: ~/.config/cheathub/config.json)"
    )

    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the logging level from the configuration file"
    )

    _ = parser.add_argument(
        "--log-dir",
        type=Path,
        default=Path("logs"),
        help="Directory for log files (default: ./logs)"
    )

    ns = parser.parse_args(argv)

    return ParsedArgs(
        config=ns.config,
        log_level=ns.log_level,
        log_dir=ns.log_dir,
    )


def setup_signal_handlers(context: ApplicationContext) -> None:
    """Route SIGTERM to a graceful shutdown on the running event loop.

    SIGINT is left to Textual, which treats ctrl+c as a key press.
    """
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGTERM, context.request_shutdown)
    except NotImplementedError:
        # Windows event loops do not support signal handlers
        log.debug("Signal handlers not supported on this platform")
        return

    log.debug("Signal handlers registered")


async def run_tui(context: ApplicationContext) -> int:
    """Run the TUI application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    from cheathub.ui.app import CheatHubApp

    log.info("Starting TUI application")

    app: CheatHubApp | None = None
    try:
        app = CheatHubApp(http_client=context.http_client, config=context.config)
        context.attach_app(app)
        setup_signal_handlers(context)
        await app.run_async()
        if context.shutdown_requested:
            log.info("TUI application stopped by signal")
        else:
            log.info("TUI application exited normally")
        return 0

    except Exception as e:
        log.error("TUI application error", error=str(e), exc_info=True)
        return 1
    finally:
        if app is not None:
            app.controller.shutdown()
        await context.cleanup()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the application."""
    args = parse_arguments(argv)
    _ = setup_logging(log_level=args.log_level or "INFO", log_dir=args.log_dir, tui_mode=True)

    context = ApplicationContext(config_path=args.config)
    log_level = args.log_level or context.config.log_level
    if log_level != (args.log_level or "INFO"):
        # Level from the config file
        _ = setup_logging(log_level=log_level, log_dir=args.log_dir, tui_mode=True)

    log.info(
        "Starting CheatHub",
        version=__version__,
        log_level=log_level,
        config_path=str(context.config_service.config_path),
        api_base_url=context.config.api_base_url,
    )

    try:
        exit_code = asyncio.run(run_tui(context))
    except KeyboardInterrupt:
        log.info("Application interrupted by user")
        exit_code = 130  # Standard exit code for SIGINT
    except Exception as e:
        log.error("Unhandled exception", error=str(e), exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        exit_code = 1

    log.info("Application exiting", exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
