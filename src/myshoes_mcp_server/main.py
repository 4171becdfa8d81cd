"""Command-line entry point for the myshoes MCP server."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from myshoes_mcp_server import __version__
from myshoes_mcp_server.client import MyshoesClient
from myshoes_mcp_server.config import ConfigurationError, Settings, require_host
from myshoes_mcp_server.fastmcp_adapter import build_fastmcp_app
from myshoes_mcp_server.tools import build_registry
from myshoes_mcp_server.tools.common import ToolContext

logger = logging.getLogger("myshoes_mcp_server")

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"
)


def configure_logging(level: int = logging.DEBUG) -> None:
    """Send log records to stderr; stdout carries the stdio protocol."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server."""
    parser = argparse.ArgumentParser(
        prog="myshoes-mcp-server",
        description="myshoes MCP server exposing target management tools.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Base URL of the myshoes API (env: MYSHOES_HOST).",
    )
    parser.add_argument(
        "--enable-command-logging",
        action="store_true",
        default=None,
        help="Log every tool request and response "
        "(env: MYSHOES_ENABLE_COMMAND_LOGGING).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (env: MYSHOES_TIMEOUT).",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http", "sse"),
        default="stdio",
        help="MCP transport to serve.",
    )
    parser.add_argument(
        "--bind", default="127.0.0.1", help="Bind address for HTTP transports."
    )
    parser.add_argument(
        "--port", type=int, default=8000, help="Port for HTTP transports."
    )
    parser.add_argument(
        "--path", default="/mcp", help="URL path for HTTP transports."
    )
    parser.add_argument(
        "--catalog", action="store_true", help="Print the tool catalog and exit."
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge command-line overrides on top of ``MYSHOES_*`` variables."""
    overrides = {
        "host": args.host,
        "enable_command_logging": args.enable_command_logging,
        "timeout": args.timeout,
    }
    return Settings(
        **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Run the server until the transport closes."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        settings = load_settings(args)
        host = require_host(settings)
    except (ConfigurationError, ValidationError) as exc:
        logger.error("invalid configuration: %s", exc)
        return 1

    client = MyshoesClient(host, timeout=settings.timeout)
    context = ToolContext(
        client=client,
        log_commands=settings.enable_command_logging,
        logger=logger,
    )

    if args.catalog:
        registry = build_registry(context)
        print(json.dumps(registry.to_catalog(), indent=2))
        return 0

    app, registry = build_fastmcp_app(context)
    run_kwargs: dict[str, object] = {}
    if args.transport != "stdio":
        run_kwargs = {"host": args.bind, "port": args.port, "path": args.path}

    logger.info(
        "serving myshoes %s over %s with tools: %s",
        host,
        args.transport,
        ", ".join(registry.available_tools()),
    )
    try:
        app.run(transport=args.transport, **run_kwargs)
    except Exception:
        logger.exception("failed to run %s server", args.transport)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
