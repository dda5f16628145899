"""Prompt definitions for the Shell Split MCP Server.

This module provides prompt templates that hand an LLM a command line
already broken into commands, so explanations and reviews follow the same
boundaries the splitter uses.
"""

import logging

from shell_split_mcp.records import ControlOperator
from shell_split_mcp.splitter import iter_commands
from shell_split_mcp.tools import render_command

logger = logging.getLogger(__name__)

_CONNECTIVES = {
    ControlOperator.AND: "then, if it succeeded",
    ControlOperator.OR: "then, if it failed",
    ControlOperator.BACKGROUND: "in the background, and then",
    ControlOperator.PIPE: "piped into",
    ControlOperator.SEQUENCE: "then",
}


def outline_command_line(command_line: str) -> str:
    """Render a numbered outline of the commands in a command line."""
    lines = []
    for record in iter_commands(command_line):
        if record.extent.is_empty:
            continue
        line = f"{len(lines) + 1}. {render_command(record)}"
        connective = _CONNECTIVES.get(record.operator)
        if connective:
            line += f"  ({connective})"
        lines.append(line)
    return "\n".join(lines) or "(no commands)"


def list_redirections(command_line: str) -> str:
    """List the redirections in a command line, one per line."""
    lines = [
        f"- {record.command.text or '(no command)'}: {record.redirection_kind.name.lower()} {record.redirection_target.text or '(missing target)'}"
        for record in iter_commands(command_line)
        if record.has_redirection
    ]
    return "\n".join(lines) or "(no redirections)"


def register_prompts(mcp):
    """Register all prompts with the MCP server instance.

    Args:
        mcp: The FastMCP server instance
    """
    logger.info("Registering shell prompt templates")

    @mcp.prompt(
        name="explain_command_line",
        description="Explain what each command in a shell command line does",
    )
    def explain_command_line(command_line: str) -> str:
        """Generate an explanation request for a command line."""
        return f"""Explain this shell command line step by step.

Command line:
{command_line}

Commands in order:
{outline_command_line(command_line)}

For each command: what it does, what its parameters mean, where its input comes from and where its output goes.
Note how each control operator decides whether the next command runs."""

    @mcp.prompt(
        name="review_redirections",
        description="Review the files a shell command line reads and writes",
    )
    def review_redirections(command_line: str) -> str:
        """Generate a redirection review request."""
        return f"""Review the file redirections in this shell command line.

Command line:
{command_line}

Redirections:
{list_redirections(command_line)}

Flag: files that get truncated, redirections with a missing target, targets that look like devices or system paths.
Output: one finding per redirection with its risk (High/Medium/Low)."""
