"""Command line utilities for the Shell Split MCP Server.

This module provides the helpers the server tools are built on:
- Input validation for command lines
- Whole-line splitting into serialized command records
- Pipeline grouping, pipe command detection and splitting
"""

import logging
from typing import Any, TypedDict

from shell_split_mcp.config import MAX_COMMANDS, MAX_INPUT_SIZE
from shell_split_mcp.records import CommandRecord, ControlOperator
from shell_split_mcp.scanner import iter_tokens
from shell_split_mcp.splitter import iter_commands

logger = logging.getLogger(__name__)


class SplitResult(TypedDict, total=False):
    """Type definition for command line split results."""

    status: str
    commands: list[dict[str, Any]]
    pipelines: list[list[str]]
    truncated: bool
    output: str


class TokenResult(TypedDict, total=False):
    """Type definition for tokenization results."""

    status: str
    tokens: list[dict[str, Any]]
    output: str


class CommandLineValidationError(Exception):
    """Exception raised when a command line is not accepted for splitting.

    This exception is raised for input the splitter is not meant to handle,
    such as multi-line text or lines longer than the configured limit.
    """

    pass


def validate_command_line(command_line: str) -> None:
    """Check that a command line can be split.

    Args:
        command_line: The command line to check

    Raises:
        CommandLineValidationError: If the line is too long or spans several lines
    """
    if len(command_line) > MAX_INPUT_SIZE:
        raise CommandLineValidationError(
            f"Command line is {len(command_line)} characters long, the limit is {MAX_INPUT_SIZE}"
        )
    if "\n" in command_line or "\r" in command_line:
        raise CommandLineValidationError("Command line must be a single line")


def split_line(command_line: str) -> SplitResult:
    """Split a validated command line into serialized records.

    Args:
        command_line: The command line to split

    Returns:
        SplitResult with one entry per command, in order, and the
        pipelines those commands form
    """
    records: list[CommandRecord] = list(iter_commands(command_line, max_commands=MAX_COMMANDS))
    truncated = records[-1].operator is not ControlOperator.NONE
    if truncated:
        logger.warning(f"Command chain truncated after {MAX_COMMANDS} commands")

    logger.debug(f"Split {len(records)} command(s) from: {command_line}")
    return SplitResult(
        status="success",
        commands=[record.to_dict() for record in records],
        pipelines=group_pipelines(records),
        truncated=truncated,
    )


def tokenize_line(command_line: str) -> TokenResult:
    """Break a validated command line into words and operators."""
    tokens = [{"text": span.text, "begin": span.begin, "end": span.end} for span in iter_tokens(command_line)]
    return TokenResult(status="success", tokens=tokens)


def group_pipelines(records: list[CommandRecord]) -> list[list[str]]:
    """Group consecutive commands joined by ``|`` into pipelines.

    Args:
        records: Records of one command line, in order

    Returns:
        One list of stage texts per pipeline; a command not piped to
        anything forms a pipeline of one stage
    """
    pipelines: list[list[str]] = []
    stages: list[str] = []
    for record in records:
        if not record.extent.is_empty:
            stages.append(render_command(record))
        if record.operator is ControlOperator.PIPE:
            continue
        if stages:
            pipelines.append(stages)
        stages = []
    if stages:
        pipelines.append(stages)
    return pipelines


def is_pipe_command(command: str) -> bool:
    """Check if a command line contains a pipe operator outside double quotes.

    Args:
        command: The command to check

    Returns:
        True if any pipeline of the line has more than one stage, False otherwise
    """
    return any(len(stages) > 1 for stages in group_pipelines(list(iter_commands(command))))


def split_pipe_command(pipe_command: str) -> list[str]:
    """Split the first pipeline of a command line into its stages.

    Args:
        pipe_command: The piped command string

    Returns:
        List of individual command strings, as written
    """
    pipelines = group_pipelines(list(iter_commands(pipe_command)))
    return pipelines[0] if pipelines else []


def render_command(record: CommandRecord) -> str:
    """Return the text of a single command as it appears in the line."""
    return record.extent.text
