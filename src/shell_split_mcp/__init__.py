"""Shell Split MCP Server.

Splits single-line shell command lines into commands, parameters,
redirections and control operators, one command per call.
"""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("shell-split-mcp-server")
except importlib.metadata.PackageNotFoundError:
    pass
