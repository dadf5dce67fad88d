"""Configuration for the documentation MCP server."""

import os

from dotenv import load_dotenv

load_dotenv()

TRANSPORTS = ("stdio", "streamable-http", "sse")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServerConfig:
    """Server configuration."""

    def __init__(self) -> None:
        """Initialize server configuration from environment variables."""
        self.docs_path = os.getenv("DOCS_PATH", "./svelte5-docs.txt")
        self.docs_title = os.getenv("DOCS_TITLE", "Svelte 5")

        self.server_name = os.getenv("DOCS_SERVER_NAME", "svelte5-docs-helper")
        self.server_version = os.getenv("DOCS_SERVER_VERSION", "1.0.0")
        self.resource_uri = os.getenv("DOCS_RESOURCE_URI", "resource://svelte/docs")
        self.resource_name = os.getenv("DOCS_RESOURCE_NAME", "svelte_docs")
        self.tool_name = os.getenv("DOCS_TOOL_NAME", "search_svelte_docs")

        self.transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
        if self.transport not in TRANSPORTS:
            raise ValueError(
                f"Invalid option for MCP_TRANSPORT. Valid options are [{'|'.join(TRANSPORTS)}]"
            )
        self.http_host = os.getenv("MCP_HTTP_HOST", "0.0.0.0")
        self.http_port = int(os.getenv("MCP_HTTP_PORT", "8080"))
        self.http_path = os.getenv("MCP_HTTP_PATH", "/docs/mcp")

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid option for LOG_LEVEL: {self.log_level}")

        # Langfuse configuration (optional)
        self.langfuse_enabled = os.getenv("LANGFUSE_ENABLED", "false").lower() == "true"
        if self.langfuse_enabled:
            self.langfuse_public_key = self._get_required_env("LANGFUSE_PUBLIC_KEY")
            self.langfuse_secret_key = self._get_required_env("LANGFUSE_SECRET_KEY")
            self.langfuse_host = self._get_required_env("LANGFUSE_HOST")
        else:
            self.langfuse_public_key = ""
            self.langfuse_secret_key = ""
            self.langfuse_host = ""

    @staticmethod
    def _get_required_env(key: str) -> str:
        """Get required environment variable or raise descriptive error."""
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Required environment variable {key} is not set")
        return value
