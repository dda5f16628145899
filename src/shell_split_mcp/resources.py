"""Resource definitions for the Shell Split MCP Server.

This module provides MCP Resources describing the command line syntax the
splitter recognizes and the limits the server applies to its input.
"""

import logging
from typing import Any

from shell_split_mcp import config
from shell_split_mcp.records import ControlOperator, RedirectionKind
from shell_split_mcp.scanner import BLANKS, QUOTE, SEPARATORS

logger = logging.getLogger(__name__)

_OPERATOR_DESCRIPTIONS = {
    ControlOperator.AND: "Run the next command only if this one succeeds",
    ControlOperator.OR: "Run the next command only if this one fails",
    ControlOperator.BACKGROUND: "Run this command in the background",
    ControlOperator.PIPE: "Feed this command's output into the next command",
    ControlOperator.SEQUENCE: "Run the next command after this one",
}

_REDIRECTION_DESCRIPTIONS = {
    RedirectionKind.OUT_TRUNCATE: "Write output to the target, truncating it",
    RedirectionKind.OUT_APPEND: "Append output to the target",
    RedirectionKind.IN: "Read input from the target",
    RedirectionKind.IN_OUT: "Open the target for reading and writing",
}


def get_grammar() -> dict[str, Any]:
    """Describe the operators, redirections and token rules of the splitter.

    Returns:
        Dictionary with operator, redirection and separator information
    """
    return {
        "control_operators": [
            {"name": op.name.lower(), "symbol": op.value, "description": description}
            for op, description in _OPERATOR_DESCRIPTIONS.items()
        ],
        "redirections": [
            {"name": kind.name.lower(), "symbol": kind.value, "description": description}
            for kind, description in _REDIRECTION_DESCRIPTIONS.items()
        ],
        "separators": sorted(SEPARATORS),
        "blanks": sorted(BLANKS),
        "quote": QUOTE,
    }


def get_limits() -> dict[str, Any]:
    """Return the input limits currently applied by the server."""
    return {
        "max_input_size": config.MAX_INPUT_SIZE,
        "max_commands": config.MAX_COMMANDS,
        "multi_line": False,
    }


def register_resources(mcp):
    """Register all resources with the MCP server instance.

    Args:
        mcp: The FastMCP server instance
    """
    logger.info("Registering shell grammar resources")

    @mcp.resource(
        name="shell_grammar",
        description="Get the operators and redirections recognized by the splitter",
        uri="shell://grammar/operators",
        mime_type="application/json",
    )
    async def shell_grammar() -> dict:
        """Get the recognized shell syntax.

        Returns:
            Dictionary with control operators, redirections and separators
        """
        return get_grammar()

    @mcp.resource(
        name="shell_limits",
        description="Get the input limits applied by the server",
        uri="shell://config/limits",
        mime_type="application/json",
    )
    async def shell_limits() -> dict:
        return get_limits()
