"""
Get Documentation Tool

Resolves one catalog id to its full documentation text.

Outcomes, all returned as ordinary tool content:
- document text when the entry exists
- a "not found" message pointing the agent back to list_all
- the underlying error message when the entry exists but can't be read
"""

import asyncio
from typing import Any

from ds_mcp.docs import DocumentStore
from ds_mcp.mcp_types import (
    MCPErrorCode,
    ToolCategory,
    ToolContext,
    ToolHandlerResult,
    ToolInput,
)
from ds_mcp.tools.base import BaseTool
from ds_mcp.tools.list_all import LIST_TOOL_NAME, GET_DOCS_TOOL_NAME
from ds_mcp.utils import Logger


def not_found_message(entry_id: str) -> str:
    return (
        f"ERROR id '{entry_id}' not found\n"
        f"First use the {LIST_TOOL_NAME} tool to get a list of available components, "
        f"React hooks and utility functions and their ids."
    )


def read_error_message(error: Exception) -> str:
    return f"Error: {str(error) or 'Unknown error'}"


class GetDocumentationTool(BaseTool):
    """Look up the documentation of a single component, hook or utility."""
    
    def __init__(self, logger: Logger, store: DocumentStore):
        super().__init__(logger, {'category': ToolCategory.DOCUMENTATION})
        self.store = store
    
    @property
    def name(self) -> str:
        return GET_DOCS_TOOL_NAME
    
    @property
    def description(self) -> str:
        return f"""Get documentation of a specific component, React hook or utility function.
Pass in the id that you get from the {LIST_TOOL_NAME} tool, for the item you want documentation for."""
    
    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": f"Entry id from {LIST_TOOL_NAME}"
                }
            },
            "required": ["id"]
        }
    
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute get_documentation."""
        validation = self.validateInput(input)
        if not validation.valid:
            self.logExecution(context, False)
            return self.invalidInput(validation)
        
        entry_id = input["id"]
        
        try:
            if not await asyncio.to_thread(self.store.exists, entry_id):
                self.logger.info(f"Documentation not found: {entry_id}")
                self.logExecution(context, False)
                return self.failure(MCPErrorCode.RESOURCE_NOT_FOUND, not_found_message(entry_id))
            
            documentation = await asyncio.to_thread(self.store.read, entry_id)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read documentation for '{entry_id}': {e}")
            self.logExecution(context, False)
            return self.failure(
                MCPErrorCode.TOOL_EXECUTION_ERROR,
                read_error_message(e),
                details=repr(e)
            )
        
        self.logExecution(context, True)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(documentation)
        )
