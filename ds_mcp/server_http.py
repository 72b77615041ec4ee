#!/usr/bin/env python3
"""
ds-mcp MCP Server - HTTP Transport
Runs as a web server using the MCP Streamable HTTP protocol.

Endpoints:
- /mcp - MCP protocol (list_all, get_documentation)
- /health - Deployment health check
- /docs/{id}.md - Raw documentation download
"""

import contextlib
from typing import Optional

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from ds_mcp import __version__
from ds_mcp.config import Config, ConfigManager
from ds_mcp.server import DesignSystemMCPServer, create_server
from ds_mcp.tools import not_found_message


class MCPEndpoint:
    """ASGI app handing every /mcp request to the session manager.
    
    Route mounts instances as raw ASGI apps, so /mcp is served without a
    trailing-slash redirect.
    """
    
    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager
    
    async def __call__(self, scope, receive, send):
        await self.session_manager.handle_request(scope, receive, send)


def create_app(server_instance: DesignSystemMCPServer) -> Starlette:
    """Build the Starlette app around an already-initialized server."""
    session_manager = StreamableHTTPSessionManager(
        app=server_instance.server,
        stateless=True,
    )
    
    async def health_check(request: Request):
        tool_count = len(server_instance.tool_registry.listTools())
        entry_count = len(server_instance.manifest.entry_ids())
        return PlainTextResponse(
            f"ds-mcp MCP Server (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Tools: {tool_count}\n"
            f"Entries: {entry_count}\n"
            f"MCP endpoint: /mcp\n"
        )
    
    async def get_documentation_raw(request: Request):
        """Serve raw documentation for direct curl download.
        
        Usage: curl -sL http://localhost:8000/docs/button.md
        """
        entry_id = request.path_params.get("entry_id", "")
        if entry_id.endswith(".md"):
            entry_id = entry_id[:-3]
        
        store = server_instance.store
        try:
            if not entry_id or not await run_in_threadpool(store.exists, entry_id):
                return PlainTextResponse(not_found_message(entry_id), status_code=404)
            content = await run_in_threadpool(store.read, entry_id)
        except (OSError, UnicodeDecodeError) as e:
            server_instance.logger.error(f"Failed to serve '{entry_id}': {e}")
            return PlainTextResponse(f"Error: {e}", status_code=500)
        
        return Response(
            content=content,
            media_type="text/markdown; charset=utf-8",
            headers={"Content-Disposition": f"inline; filename={entry_id}.md"}
        )
    
    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        async with session_manager.run():
            yield
    
    return Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/docs/{entry_id}", endpoint=get_documentation_raw),
            Route("/mcp", endpoint=MCPEndpoint(session_manager)),
        ],
        lifespan=lifespan,
    )


async def main(config: Optional[Config] = None):
    """Run the HTTP server."""
    import uvicorn
    
    config = config or ConfigManager.get_instance().get()
    server_instance = create_server(config)
    app = create_app(server_instance)
    
    host, port = config.http_host, config.http_port
    server_instance.logger.info(f"ds-mcp MCP Server (HTTP) starting on http://{host}:{port}")
    server_instance.logger.info(f"  MCP:      http://{host}:{port}/mcp")
    server_instance.logger.info(f"  Health:   http://{host}:{port}/health")
    server_instance.logger.info(f"  Download: http://{host}:{port}/docs/{{id}}.md")
    
    uvicorn_config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower(),
    )
    await uvicorn.Server(uvicorn_config).serve()
