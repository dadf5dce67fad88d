"""Documentation search MCP server."""

from .config import ServerConfig
from .server import DocsServer, TransportState

__all__ = ["DocsServer", "ServerConfig", "TransportState"]
