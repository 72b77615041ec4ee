"""
Tools Module

The 2 MCP tools for ds-mcp:
- list_all: Catalog of components, hooks and utilities
- get_documentation: Full documentation for one catalog id
"""

from .base import BaseTool
from .registry import ToolRegistry, MapToolMonitoring
from .list_all import ListAllTool, LIST_TOOL_NAME, GET_DOCS_TOOL_NAME
from .get_documentation import GetDocumentationTool, not_found_message

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "MapToolMonitoring",
    "ListAllTool",
    "GetDocumentationTool",
    "LIST_TOOL_NAME",
    "GET_DOCS_TOOL_NAME",
    "not_found_message",
]
