"""
MCP stdio entry point.

This module is the Composition Root: it wires the Qdrant adapter, the embedding
provider factory and the text splitter into the tool registry and serves it
over stdio. stdout carries the protocol, so logs go to stderr.

Run:
    better-qdrant-mcp-server
    # or
    python -m better_qdrant.infrastructure.entrypoints.mcp_server
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, ServerResult, Tool

from better_qdrant.infrastructure.config.settings import QdrantSettings, log_level_from_env
from better_qdrant.infrastructure.embeddings.factory import EmbeddingProviderFactory
from better_qdrant.infrastructure.entrypoints.tool_registry import ToolRegistry, create_tools
from better_qdrant.infrastructure.knowledge_base.text_splitter import RecursiveTextSplitter
from better_qdrant.infrastructure.vector_store.qdrant_store import QdrantVectorStore

logger = logging.getLogger(__name__)

SERVER_NAME = "better-qdrant"


def build_server(registry: ToolRegistry) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return registry.list_tools()

    # Registered directly so an McpError from the registry reaches the client
    # as a JSON-RPC error instead of a tool result.
    async def call_tool(request: CallToolRequest) -> ServerResult:
        params = request.params
        return ServerResult(await registry.call(params.name, params.arguments))

    server.request_handlers[CallToolRequest] = call_tool

    return server


def build_registry() -> ToolRegistry:
    settings = QdrantSettings.from_env()
    return create_tools(
        vector_store=QdrantVectorStore.from_url(settings.url, settings.api_key),
        providers=EmbeddingProviderFactory(),
        splitter=RecursiveTextSplitter(),
    )


async def serve() -> None:
    server = build_server(build_registry())
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Better Qdrant MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=log_level_from_env(),
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
