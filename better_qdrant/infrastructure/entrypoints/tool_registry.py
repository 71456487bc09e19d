"""
MCP tool wrappers for the application use-cases.

Tool schemas and the MCP types are an entrypoint concern and must NOT appear in
the application or domain layers. This module binds each use-case to a named
tool, validates arguments structurally before dispatch, and turns failures into
text results flagged with isError.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, CallToolResult, ErrorData, TextContent, Tool
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as ArgumentsError

from better_qdrant.application.services.embedding_catalog import (
    RECOMMENDATIONS,
    recommendations_for_dimension,
)
from better_qdrant.application.use_cases.ingest_document import IngestDocumentUseCase
from better_qdrant.application.use_cases.manage_collections import (
    DeleteCollectionUseCase,
    ListCollectionsUseCase,
)
from better_qdrant.application.use_cases.search_collection import SearchCollectionUseCase
from better_qdrant.domain.entities.embedding_config import (
    EmbeddingProviderConfig,
    EmbeddingProviderKind,
)
from better_qdrant.domain.exceptions import ValidationError
from better_qdrant.domain.ports.embedding_provider_port import IEmbeddingProviderFactory
from better_qdrant.domain.ports.text_splitter_port import ITextSplitter
from better_qdrant.domain.ports.vector_store_port import IVectorStore
from better_qdrant.infrastructure.config.settings import embedding_config_from_env

logger = logging.getLogger(__name__)


class ListCollectionsArgs(BaseModel):
    pass


class AddDocumentsArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: StrictStr = Field(alias="filePath", description="Path to the file to process")
    collection: StrictStr = Field(
        min_length=1, description="Name of the collection to add documents to"
    )
    embedding_service: EmbeddingProviderKind = Field(
        alias="embeddingService", description="Embedding service to use"
    )
    chunk_size: Optional[StrictInt] = Field(
        default=None, gt=0, alias="chunkSize", description="Size of text chunks (optional)"
    )
    chunk_overlap: Optional[StrictInt] = Field(
        default=None, ge=0, alias="chunkOverlap", description="Overlap between chunks (optional)"
    )


class SearchArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: StrictStr = Field(description="Search query")
    collection: StrictStr = Field(min_length=1, description="Name of the collection to search in")
    embedding_service: EmbeddingProviderKind = Field(
        alias="embeddingService", description="Embedding service to use"
    )
    limit: Optional[StrictInt] = Field(
        default=None, gt=0, description="Maximum number of results to return (optional)"
    )


class DeleteCollectionArgs(BaseModel):
    collection: StrictStr = Field(min_length=1, description="Name of the collection to delete")


class ListEmbeddingServicesArgs(BaseModel):
    dimension: Optional[StrictInt] = Field(
        default=None, gt=0, description="Only list services producing this vector size (optional)"
    )


@dataclass(frozen=True)
class RegisteredTool:
    name: str
    description: str
    arguments: type[BaseModel]
    handler: Callable[[Any], Awaitable[str]]
    error_prefix: str


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def _invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


class ToolRegistry:
    """Name → tool lookup plus argument validation and error translation."""

    def __init__(self, tools: list[RegisteredTool]) -> None:
        self._tools = {tool.name: tool for tool in tools}

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.arguments.model_json_schema(by_alias=True),
            )
            for tool in self._tools.values()
        ]

    async def call(self, name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        """Validate *arguments* and run tool *name*.

        Raises:
            McpError: INVALID_PARAMS for an unknown tool or malformed arguments;
                      these never reach a use-case.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise _invalid_params(f"Unknown tool: {name}")
        try:
            args = tool.arguments.model_validate(arguments or {})
        except ArgumentsError as exc:
            raise _invalid_params(f"Invalid arguments for {name}: {exc}") from exc

        try:
            text = await tool.handler(args)
        except ValidationError as exc:
            logger.warning("Tool %s rejected: %s", name, exc)
            return _text_result(str(exc), is_error=True)
        except Exception as exc:
            logger.exception("Tool %s failed", name)
            return _text_result(f"{tool.error_prefix}: {exc}", is_error=True)
        return _text_result(text)


def create_tools(
    vector_store: IVectorStore,
    providers: IEmbeddingProviderFactory,
    splitter: ITextSplitter,
    resolve_config: Callable[[str], EmbeddingProviderConfig] = embedding_config_from_env,
) -> ToolRegistry:
    """Build the tool registry with injected use-case dependencies.

    Args:
        vector_store:   IVectorStore implementation (e.g. QdrantVectorStore).
        providers:      IEmbeddingProviderFactory implementation.
        splitter:       ITextSplitter implementation (e.g. RecursiveTextSplitter).
        resolve_config: Maps an embedding service name to its provider config;
                        called on every invocation so environment changes apply.
    """
    list_uc = ListCollectionsUseCase(vector_store)
    delete_uc = DeleteCollectionUseCase(vector_store)
    ingest_uc = IngestDocumentUseCase(splitter, providers, vector_store)
    search_uc = SearchCollectionUseCase(providers, vector_store)

    async def list_collections(args: ListCollectionsArgs) -> str:
        return json.dumps(await list_uc.execute(), indent=2)

    async def add_documents(args: AddDocumentsArgs) -> str:
        content = await asyncio.to_thread(Path(args.file_path).read_text, encoding="utf-8")
        result = await ingest_uc.execute(
            content,
            args.collection,
            resolve_config(args.embedding_service.value),
            source=args.file_path,
            chunk_size=args.chunk_size,
            chunk_overlap=args.chunk_overlap,
        )
        message = (
            f"Successfully processed and added {result.chunk_count} chunks "
            f"to collection {result.collection}"
        )
        if result.warnings:
            message += "\n\nWarnings:\n" + "\n".join(result.warnings)
        return message

    async def search(args: SearchArgs) -> str:
        return await search_uc.execute(
            args.query,
            args.collection,
            resolve_config(args.embedding_service.value),
            limit=args.limit,
        )

    async def delete_collection(args: DeleteCollectionArgs) -> str:
        await delete_uc.execute(args.collection)
        return f"Successfully deleted collection: {args.collection}"

    async def list_embedding_services(args: ListEmbeddingServicesArgs) -> str:
        services = (
            RECOMMENDATIONS
            if args.dimension is None
            else recommendations_for_dimension(args.dimension)
        )
        return json.dumps([asdict(service) for service in services], indent=2)

    return ToolRegistry(
        [
            RegisteredTool(
                name="list_collections",
                description="List all available Qdrant collections",
                arguments=ListCollectionsArgs,
                handler=list_collections,
                error_prefix="Error listing collections",
            ),
            RegisteredTool(
                name="add_documents",
                description="Add documents to a Qdrant collection with specified embedding service",
                arguments=AddDocumentsArgs,
                handler=add_documents,
                error_prefix="Error adding documents",
            ),
            RegisteredTool(
                name="search",
                description="Search for similar documents in a collection",
                arguments=SearchArgs,
                handler=search,
                error_prefix="Error searching",
            ),
            RegisteredTool(
                name="delete_collection",
                description="Delete a Qdrant collection",
                arguments=DeleteCollectionArgs,
                handler=delete_collection,
                error_prefix="Error deleting collection",
            ),
            RegisteredTool(
                name="list_embedding_services",
                description=(
                    "List recommended embedding services with the vector size each produces"
                ),
                arguments=ListEmbeddingServicesArgs,
                handler=list_embedding_services,
                error_prefix="Error listing embedding services",
            ),
        ]
    )
