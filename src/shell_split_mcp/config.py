"""Configuration settings for the Shell Split MCP Server.

This module contains configuration settings for the Shell Split MCP Server.

Environment variables:
- SHELL_SPLIT_MAX_INPUT: Maximum command line length in characters (default: 4096)
- SHELL_SPLIT_MAX_COMMANDS: Maximum number of commands split from one line (default: 256)
- SHELL_SPLIT_TRANSPORT: Transport protocol to use ("stdio", "sse" or "streamable-http", default: "stdio")
- SHELL_SPLIT_HOST: Address to bind for network transports (default: 0.0.0.0 in a container, 127.0.0.1 otherwise)
- SHELL_SPLIT_PORT: Port to bind for network transports (default: 8000)
"""

import os
from pathlib import Path

MAX_INPUT_SIZE = int(os.environ.get("SHELL_SPLIT_MAX_INPUT", "4096"))
MAX_COMMANDS = int(os.environ.get("SHELL_SPLIT_MAX_COMMANDS", "256"))
TRANSPORT = os.environ.get("SHELL_SPLIT_TRANSPORT", "stdio")
HOST = os.environ.get("SHELL_SPLIT_HOST")
PORT = int(os.environ.get("SHELL_SPLIT_PORT", "8000"))

INSTRUCTIONS = """
Shell Split MCP Server breaks shell command lines into their commands without executing anything.

TOOLS:
- shell_split: Split a command line into commands, parameters, redirections and control operators
  Example: shell_split(command_line="make && ./run > out.log ; echo done")
  -> three commands: make (&&), ./run with > out.log (;), echo done
- shell_tokens: List the words and operators of a command line in order
  Example: shell_tokens(command_line="ls -l | sort") -> ls, -l, |, sort

RECOGNIZED SYNTAX:
  - Control operators: && || & | ;
  - Redirections: > >> < <>
  - Double quotes keep operator characters inside them as plain text
  - Everything else (variables, globs, subshells, escapes) is passed through as text

RESOURCES:
  - shell://grammar/operators: The recognized operators and redirections
  - shell://config/limits: Input limits applied by this server

PROMPTS:
  - explain_command_line: Explain what each command of a line does
  - review_redirections: Review the files a command line reads and writes
"""


def is_docker_environment() -> bool:
    """Detect whether the server runs inside a container.

    Returns:
        True if a Docker or containerd environment is detected, False otherwise
    """
    if Path("/.dockerenv").exists():
        return True
    try:
        with open("/proc/1/cgroup") as cgroup:
            content = cgroup.read()
            if "docker" in content or "containerd" in content:
                return True
    except OSError:
        pass
    return os.environ.get("container") is not None
