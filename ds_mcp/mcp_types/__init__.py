"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    ToolCategory,
    MCPErrorCode,
    TextContent,
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
    ToolMetadata,
    ToolValidationError,
    ToolValidationResult,
    ToolExecution,
    ToolExecutionResult,
    ToolMetrics,
    ToolMonitoring,
    ToolHandler,
)

__all__ = [
    "ToolCategory",
    "MCPErrorCode",
    "TextContent",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    "ToolMetadata",
    "ToolValidationError",
    "ToolValidationResult",
    "ToolExecution",
    "ToolExecutionResult",
    "ToolMetrics",
    "ToolMonitoring",
    "ToolHandler",
]
