"""Command-line interface for termfolio.

Provides the main entry point for running the terminal in the local TTY,
serving it over HTTP, or driving a running endpoint remotely.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termfolio",
        description="Interactive terminal-style portfolio",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/termfolio.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    console_parser = subparsers.add_parser("console", help="Run the terminal in this TTY")
    console_parser.add_argument(
        "--no-sound", action="store_true",
        help="Start with keystroke sounds off",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve the terminal over HTTP")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--display", action="store_true",
        help="Also open the pygame display window",
    )

    send_parser = subparsers.add_parser("send", help="Submit a command line to a running endpoint")
    send_parser.add_argument("line", type=str, help="Command line to submit, e.g. 'open project1'")
    send_parser.add_argument("--url", type=str, default=None, help="Endpoint base URL")

    return parser.parse_args(argv)


async def _run_console(settings) -> None:
    from termfolio.console import ConsoleFrontend
    from termfolio.endpoint.terminal import InteractiveTerminal

    terminal = InteractiveTerminal.from_settings(settings)
    await ConsoleFrontend(terminal).run()


async def _send(settings, args) -> int:
    from termfolio.client import TerminalClient, TerminalClientError

    base_url = args.url or settings.client.base_url
    try:
        async with TerminalClient(base_url=base_url, timeout=settings.client.timeout) as client:
            await client.send_line(args.line)
            print(await client.get_screen())
    except TerminalClientError as e:
        print(f"termfolio: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the termfolio CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from termfolio.config.settings import load_settings
    from termfolio.content.store import ContentError
    from termfolio.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    try:
        if args.command == "console":
            if args.no_sound:
                settings.sound.enabled = False
            # Log records go to the log file only while the TTY is in use.
            setup_logging(settings.logging, console=False)
            asyncio.run(_run_console(settings))

        elif args.command == "serve":
            setup_logging(settings.logging)
            logger.info("Starting endpoint server")
            from termfolio.endpoint.server import create_app
            import uvicorn

            ep = settings.endpoint
            if args.display:
                ep.display_enabled = True
            app = create_app(settings=settings)
            uvicorn.run(
                app,
                host=args.host or ep.host,
                port=args.port or ep.port,
            )

        elif args.command == "send":
            setup_logging(settings.logging)
            sys.exit(asyncio.run(_send(settings, args)))

    except ContentError as e:
        print(f"termfolio: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
