#!/usr/bin/env python3
"""
ds-mcp MCP Server
Serves the design system catalog and per-entry documentation as MCP tools.
"""

import time
import uuid
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp import types
from ds_mcp import __version__, __package_name__
from ds_mcp.config import Config, ConfigManager
from ds_mcp.docs import (
    CachingDocumentStore,
    DocumentStore,
    FileDocumentStore,
    ManifestProvider,
)
from ds_mcp.mcp_types import ToolContext
from ds_mcp.tools import ToolRegistry, ListAllTool, GetDocumentationTool
from ds_mcp.utils import Logger


INSTRUCTIONS = (
    "Documentation for the Reshaped design system. "
    "Call list_all to discover component, hook and utility ids, "
    "then get_documentation for the ones you need."
)


def build_document_store(config: Config) -> DocumentStore:
    store: DocumentStore = FileDocumentStore(config.docs_root)
    if config.cache_documents:
        store = CachingDocumentStore(store)
    return store


class DesignSystemMCPServer:
    """Main MCP Server for ds-mcp.
    
    Construction loads the catalog; a missing catalog raises
    CatalogNotFoundError and no server is created.
    """
    
    def __init__(self, config: Optional[Config] = None, logger: Optional[Logger] = None):
        self.config = config or ConfigManager.get_instance().get()
        self.logger = logger or Logger(name=__package_name__, level=self.config.log_level)
        
        self.manifest = ManifestProvider.load(self.config.manifest_path)
        self.store = build_document_store(self.config)
        if self.config.validate_on_startup:
            self.manifest.validate(self.store)
            self.logger.info("Catalog validated against documentation files")
        
        self.tool_registry = ToolRegistry(self.logger)
        self._register_tools()
        
        self.server = Server(__package_name__, version=__version__, instructions=INSTRUCTIONS)
        self._setup_handlers()
        
        self.logger.info(
            f"Loaded catalog from {self.config.manifest_path}",
            extra={'entries': len(self.manifest.entry_ids()), 'docs_root': str(self.config.docs_root)}
        )
    
    def _register_tools(self):
        self.tool_registry.register(ListAllTool(self.logger, self.manifest))
        self.tool_registry.register(GetDocumentationTool(self.logger, self.store))
    
    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""
        
        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.list_tools()
        
        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
            return await self.call_tool(name, arguments or {})
    
    def list_tools(self) -> list[types.Tool]:
        tools = self.tool_registry.getToolSchemas()
        self.logger.debug(f"Exposing {len(tools)} tools")
        return tools
    
    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        """Execute a tool - MCP tools/call handler.
        
        Failure results (unknown id, unreadable document, bad input) come back
        as ordinary text content. Only an unknown tool name raises.
        """
        if not self.tool_registry.hasTool(name):
            self.logger.error(f"Tool not found: {name}")
            raise ValueError(f"Tool '{name}' not found")
        
        context = ToolContext(
            requestId=f"req_{uuid.uuid4().hex[:12]}",
            timestamp=time.time(),
            toolName=name
        )
        result = await self.tool_registry.execute(name, arguments, context)
        
        if result.result is None:
            message = result.error.message if result.error else "Unknown error"
            raise RuntimeError(f"Tool execution failed: {message}")
        
        return [
            types.TextContent(type="text", text=item.text)
            for item in result.result.content
        ]
    
    async def start(self):
        """Serve over stdio until the client disconnects."""
        self.logger.info(f"{__package_name__} v{__version__} serving over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def create_server(config: Optional[Config] = None) -> DesignSystemMCPServer:
    """Build a server, logging fatal catalog problems before re-raising them."""
    config = config or ConfigManager.get_instance().get()
    try:
        return DesignSystemMCPServer(config)
    except Exception as e:
        Logger(name=__package_name__, level=config.log_level).error(f"Failed to start server: {e}")
        raise


async def run_stdio(config: Optional[Config] = None):
    """Run in stdio mode (for Cursor/Claude Desktop)."""
    server = create_server(config)
    await server.start()
