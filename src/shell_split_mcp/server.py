"""Main server implementation for Shell Split MCP Server.

This module defines the MCP server instance and tool functions that split
shell command lines into commands, parameters, redirections and control
operators. It also registers MCP Resources and Prompts describing the
recognized syntax.
"""

import logging
import sys

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from shell_split_mcp.config import INSTRUCTIONS
from shell_split_mcp.prompts import register_prompts
from shell_split_mcp.resources import register_resources
from shell_split_mcp.tools import (
    CommandLineValidationError,
    SplitResult,
    TokenResult,
    is_pipe_command,
    split_line,
    tokenize_line,
    validate_command_line,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger("shell-split-mcp-server")

mcp = FastMCP(
    "Shell Split MCP Server",
    instructions=INSTRUCTIONS,
)

register_prompts(mcp)
register_resources(mcp)


@mcp.tool()
async def shell_split(
    command_line: str = Field(description="Single-line shell command line, e.g. 'make && ./run > out.log ; echo done'"),
    ctx: Context | None = None,
) -> SplitResult:
    """Split a shell command line into its individual commands.

    Each command is reported with:
    - command: the command name
    - parameters: all parameter text as one piece (double quotes kept)
    - redirection: kind (truncate, append, in, in_out) and target, if any
    - operator: the control operator joining it to the next command
      (and, or, background, pipe, sequence, or none for the last one)

    Commands joined by pipes are also grouped into pipelines, each listed
    as the text of its stages.

    Nothing is executed. Variables, globs and subshells are not expanded.

    EXAMPLES:
    - ls -l | sort > listing.txt
    - make && ./run >> out.log ; echo done
    - echo "a;b" > f   (the quoted ; is not an operator)
    """
    logger.info(f"Splitting command line: {command_line}")

    try:
        validate_command_line(command_line)
        if ctx:
            message = "Splitting" + (" piped" if is_pipe_command(command_line) else "") + " command line"
            await ctx.info(message)

        result = split_line(command_line)

        if ctx:
            await ctx.info(f"Found {len(result['commands'])} command(s)")
            if result["truncated"]:
                await ctx.warning("Command chain was truncated")

        return result
    except CommandLineValidationError as e:
        logger.warning(f"Command line rejected: {e}")
        return SplitResult(status="error", commands=[], pipelines=[], output=f"Invalid command line: {str(e)}")
    except Exception as e:
        logger.error(f"Error in shell_split: {e}")
        return SplitResult(status="error", commands=[], pipelines=[], output=f"Unexpected error: {str(e)}")


@mcp.tool()
async def shell_tokens(
    command_line: str = Field(description="Single-line shell command line to break into words and operators"),
    ctx: Context | None = None,
) -> TokenResult:
    """List the words and operators of a shell command line in order.

    Blanks and operator characters end a word unless they are inside
    double quotes. Operators (&&, ||, &, |, ;, >, >>, <, <>) are reported
    as tokens of their own.
    """
    logger.info(f"Tokenizing command line: {command_line}")

    try:
        validate_command_line(command_line)
        if ctx:
            await ctx.info("Tokenizing command line")

        return tokenize_line(command_line)
    except CommandLineValidationError as e:
        logger.warning(f"Command line rejected: {e}")
        return TokenResult(status="error", tokens=[], output=f"Invalid command line: {str(e)}")
    except Exception as e:
        logger.error(f"Error in shell_tokens: {e}")
        return TokenResult(status="error", tokens=[], output=f"Unexpected error: {str(e)}")
