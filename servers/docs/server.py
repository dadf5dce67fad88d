"""Documentation search MCP server."""

import argparse
import asyncio
import enum
import logging
import socket
import sys
import uuid
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Dict, List, Optional

import uvicorn
from fastmcp import FastMCP
from fastmcp.server.dependencies import get_http_request
from opentelemetry import trace
from pydantic import Field
from starlette.requests import Request

from backends import (
    MAX_MATCHES,
    AbstractContentFetcher,
    AbstractSearchClient,
    Corpus,
    CorpusContentFetcher,
    CorpusLoadError,
    ResourceDescriptor,
    SearchRequest,
    SubstringSearchClient,
    load_corpus,
)
from core import PromptManager, TelemetryManager
from servers.docs.config import TRANSPORTS, ServerConfig

logger = logging.getLogger(__name__)


class TransportState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


def _trace_id() -> str:
    """Trace id from the X-TRACE-ID header on HTTP transports, random otherwise."""
    try:
        request: Request = get_http_request()
        return str(request.headers.get("X-TRACE-ID", uuid.uuid4()))
    except RuntimeError:
        return str(uuid.uuid4())


class DocsServer:
    """Serves one corpus as an MCP resource and a line search tool."""

    def __init__(
        self,
        corpus: Corpus,
        config: Optional[ServerConfig] = None,
        prompt_manager: Optional[PromptManager] = None,
        telemetry: Optional[TelemetryManager] = None,
    ) -> None:
        """Build the FastMCP app for a loaded corpus.

        Args:
            corpus: Corpus loaded at startup
            config: Server configuration, read from the environment when omitted
            prompt_manager: Source of titles and descriptions
            telemetry: Tracing setup, built from config when omitted
        """
        self.config = config or ServerConfig()
        self.corpus = corpus
        self.search_client: AbstractSearchClient = SubstringSearchClient(corpus)
        self.content_fetcher: AbstractContentFetcher = CorpusContentFetcher(corpus)
        self.telemetry = telemetry or TelemetryManager(
            enabled=self.config.langfuse_enabled,
            public_key=self.config.langfuse_public_key,
            secret_key=self.config.langfuse_secret_key,
            host=self.config.langfuse_host,
            tag=self.config.server_name,
        )
        self.tracer = self.telemetry.get_tracer(self.config.server_name)
        self.state = TransportState.DISCONNECTED

        prompts = prompt_manager or PromptManager()
        context = {
            "docs_title": self.config.docs_title,
            "resource_uri": self.config.resource_uri,
            "tool_name": self.config.tool_name,
            "max_matches": MAX_MATCHES,
        }
        self.resource = ResourceDescriptor(
            uri=self.config.resource_uri,
            title=prompts.render_prompt("resources.docs.title", **context),
            mime_type="text/plain",
            name=self.config.resource_name,
            description=prompts.render_prompt("resources.docs.description", **context),
        )
        self._tool_title = prompts.render_prompt("tools.search.title", **context)
        self._tool_description = prompts.render_prompt("tools.search.description", **context)
        self._query_description = prompts.render_prompt("tools.search.query", **context)

        self.mcp = FastMCP(
            name=self.config.server_name,
            version=self.config.server_version,
            instructions=prompts.render_prompt("server.instructions", **context),
            lifespan=self._lifespan,
        )
        self._register_resources()
        self._register_tools()

    def _register_resources(self) -> None:
        descriptor = self.resource

        @self.mcp.resource(
            descriptor.uri,
            name=descriptor.name,
            title=descriptor.title,
            description=descriptor.description,
            mime_type=descriptor.mime_type,
        )
        def read_docs() -> str:
            return self.content_fetcher.get_content()

        logger.info(f"Resource registered: {descriptor.uri}")

    def _register_tools(self) -> None:
        @self.mcp.tool(
            name=self.config.tool_name,
            title=self._tool_title,
            description=self._tool_description,
        )
        def search_docs(
            query: Annotated[str, Field(description=self._query_description)],
        ) -> str:
            return self.search(SearchRequest(query=query))

        logger.info(f"Tool registered: {self.config.tool_name}")

    def search(self, request: SearchRequest) -> str:
        """Run a validated search and return the newline-joined matches."""
        with self.tracer.start_as_current_span("DocsMcp:search") as span:
            results = self.search_client.search(request.query, MAX_MATCHES)
            logger.info(f"Search query: {request.query!r} -> {len(results)} lines")
            self.telemetry.set_span_attributes(
                span,
                input_data={"query": request.query},
                output_data={"matches": len(results)},
                session_id=_trace_id(),
            )
            return self.search_client.format_results(results)

    @asynccontextmanager
    async def _lifespan(self, server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
        """Entered by FastMCP once the transport is running."""
        if self.state is TransportState.CONNECTED:
            logger.info(f"[{self.config.server_name}] MCP server ready on {self.config.transport}")
        yield {}

    def _bind_socket(self) -> socket.socket:
        host = self.config.http_host
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        return socket.create_server((host, self.config.http_port), family=family)

    async def serve_async(self) -> None:
        """Bind the configured transport and serve until the channel closes.

        Raises:
            RuntimeError: If a transport has already been bound
            OSError: If the HTTP host/port cannot be bound
        """
        if self.state is TransportState.CONNECTED:
            raise RuntimeError(f"{self.config.server_name} is already bound to a transport")

        transport = self.config.transport
        if transport == "stdio":
            self.state = TransportState.CONNECTED
            await self.mcp.run_async(transport="stdio", show_banner=False)
            return

        sock = self._bind_socket()
        self.state = TransportState.CONNECTED
        app = self.mcp.http_app(path=self.config.http_path, transport=transport)
        config = uvicorn.Config(app, log_level=self.config.log_level.lower(), lifespan="on")
        server = uvicorn.Server(config)
        await server.serve(sockets=[sock])

    def serve(self) -> None:
        asyncio.run(self.serve_async())


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a text document over MCP")
    parser.add_argument("--docs", help="path to the text document (overrides DOCS_PATH)")
    parser.add_argument(
        "--transport", choices=TRANSPORTS, help="transport to bind (overrides MCP_TRANSPORT)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = _parse_args(argv)
    config = ServerConfig()
    if args.docs:
        config.docs_path = args.docs
    if args.transport:
        config.transport = args.transport
    logging.basicConfig(level=config.log_level)

    try:
        corpus = load_corpus(config.docs_path)
    except CorpusLoadError as exc:
        logger.error(f"Cannot start {config.server_name}: {exc}")
        sys.exit(1)

    server = DocsServer(corpus, config)
    try:
        logger.info("Starting Docs Helper MCP server...")
        server.serve()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt (CTRL+C)")
    except Exception as exc:
        logger.error(f"Server error: {exc}")
        raise
    finally:
        logger.info("Server has shut down.")


if __name__ == "__main__":
    main()
