"""Main entry point for the Shell Split MCP Server.

Runs the server over stdio by default. The network transports bind to the
address and port from the environment (see ``shell_split_mcp.config``).
"""

import logging
import os
import signal
import sys

from shell_split_mcp import config
from shell_split_mcp.server import logger, mcp

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

TRANSPORTS = ("stdio", "sse", "streamable-http")


def handle_interrupt(signum, frame):
    """Handle interrupt signal by exiting immediately."""
    logger.info(f"Received signal {signum}, shutting down...")
    os._exit(0)


def resolve_host() -> str:
    """Pick the bind address for network transports.

    An explicit SHELL_SPLIT_HOST wins; containers need 0.0.0.0 for port
    mapping, everywhere else the server stays on loopback.
    """
    if config.HOST:
        return config.HOST
    return "0.0.0.0" if config.is_docker_environment() else "127.0.0.1"


def configure_network() -> None:
    """Apply host and port settings to the FastMCP instance."""
    mcp.settings.host = resolve_host()
    mcp.settings.port = config.PORT
    logger.info(f"{config.TRANSPORT} server binding to {mcp.settings.host}:{mcp.settings.port}")


def main():
    """Entry point for the Shell Split MCP Server CLI."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)

    if config.TRANSPORT not in TRANSPORTS:
        logger.error(f"Invalid transport protocol: {config.TRANSPORT}. Must be one of {', '.join(TRANSPORTS)}")
        sys.exit(1)

    logger.info(
        f"Starting server with transport protocol: {config.TRANSPORT} "
        f"(max input {config.MAX_INPUT_SIZE} characters, max {config.MAX_COMMANDS} commands per line)"
    )

    if config.TRANSPORT != "stdio":
        configure_network()

    try:
        mcp.run(transport=config.TRANSPORT)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received. Shutting down...")
        os._exit(0)


if __name__ == "__main__":
    main()
